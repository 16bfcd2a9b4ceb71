"""memosync: user store with write-through cache and federation sync of external users' memos."""

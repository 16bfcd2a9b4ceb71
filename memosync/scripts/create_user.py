"""
Create a user through the store facade. Run from project root:
  python -m memosync.scripts.create_user USERNAME [role]
Example (a federated account mirrored from another instance):
  python -m memosync.scripts.create_user https://remote.example/u/alice EXTERNAL
"""
import argparse
import sys

from memosync.core.config import get_settings
from memosync.core.database import session_factory_from_settings
from memosync.schemas.user import ROLE_VALUES, FindUser, User
from memosync.services.remote_fetcher import build_remote_memo_url
from memosync.store import SqlAlchemyDriver, Store, StoreError


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a memosync user (no registration UI).")
    parser.add_argument("username", help="Username, or remote address for EXTERNAL users")
    parser.add_argument("role", nargs="?", default="USER", choices=sorted(ROLE_VALUES))
    parser.add_argument("--nickname", default="", help="Display name")
    parser.add_argument("--email", default="", help="Contact email")
    args = parser.parse_args()

    username = args.username.strip()
    if not username or len(username) > 1024:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if args.role == "EXTERNAL":
        try:
            build_remote_memo_url(username)
        except ValueError as e:
            print(f"Invalid external user address: {e}", file=sys.stderr)
            return 1

    store = Store(SqlAlchemyDriver(session_factory_from_settings(get_settings())))
    try:
        if store.get_user(FindUser(username=username)) is not None:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = store.create_user(
            User(username=username, role=args.role, nickname=args.nickname, email=args.email)
        )
    except StoreError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(f"Created user '{user.username}' (ID={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

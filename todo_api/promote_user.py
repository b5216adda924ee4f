"""Change the role of an existing user.

Usage:
    python -m todo_api.promote_user jane@x.com
    python -m todo_api.promote_user jane@x.com --role user
"""
import argparse
import sys

from todo_api.auth.store import UserStore
from todo_api.database import SessionLocal
from todo_api.models.user import UserRole


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Set the role of a registered user")
    parser.add_argument("email", help="Email address the user registered with")
    parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.ADMIN.value,
        help="Role to assign (defaults to admin)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, session_factory=SessionLocal) -> int:
    args = parse_args(argv)

    db = session_factory()
    try:
        store = UserStore(db)
        user = store.find_by_email(args.email)
        if user is None:
            print(f"Error: no user registered with {args.email}", file=sys.stderr)
            return 1
        user = store.update(user, role=UserRole(args.role))
    finally:
        db.close()

    print(f"User #{user.id} <{user.email}> now has role {user.role.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

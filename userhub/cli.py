"""
Userhub - Admin CLI
Bootstrap accounts and mint access tokens from the command line
"""

import argparse
import asyncio
import getpass
import sys
from typing import List, Optional

from userhub import __version__
from userhub.core.database import AsyncSessionLocal, init_db, close_db
from userhub.core.errors import UserhubError
from userhub.models.user import UserRole
from userhub.schemas.user import validate_user_update
from userhub.services.user_service import UserService
from userhub.auth.security import create_user_token


async def create_user(name: str, email: str, password: str, role: UserRole) -> int:
    """Create a user, returning the process exit code"""
    result = validate_user_update({"name": name, "email": email, "password": password, "role": role.value})
    if not result.success:
        for err in result.errors:
            print(f"❌ {err['field']}: {err['message']}")
        return 1

    await init_db()
    try:
        async with AsyncSessionLocal() as db:
            user = await UserService.create_user(
                db,
                name=result.data["name"],
                email=result.data["email"],
                password=result.data["password"],
                role=result.data["role"],
            )
    except UserhubError as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        await close_db()

    print(f"✅ Created {user.role.value} {user.email} (id={user.id})")
    return 0


async def issue_token(email: str) -> int:
    """Print a bearer token for an existing user"""
    await init_db()
    try:
        async with AsyncSessionLocal() as db:
            user = await UserService.get_user_by_email(db, email.strip().lower())
    finally:
        await close_db()

    if user is None:
        print(f"❌ No user with email {email}")
        return 1

    print(create_user_token(user))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="userhub-admin", description="Userhub administration")
    parser.add_argument("--version", action="version", version=f"v{__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-user", help="Create a user account")
    create.add_argument("--name", required=True, help="Display name")
    create.add_argument("--email", required=True, help="Login email")
    create.add_argument(
        "--role",
        choices=[r.value for r in UserRole],
        default=UserRole.ADMIN.value,
        help="Account role (default: admin)",
    )
    create.add_argument("--password", help="Password (prompted when omitted)")

    token = commands.add_parser("issue-token", help="Print an access token for a user")
    token.add_argument("--email", required=True, help="Login email")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "create-user":
        password = args.password
        if password is None:
            password = getpass.getpass("Password: ")
            if password != getpass.getpass("Confirm Password: "):
                print("❌ Passwords do not match")
                return 1
        return asyncio.run(create_user(args.name, args.email, password, UserRole(args.role)))

    return asyncio.run(issue_token(args.email))


if __name__ == "__main__":
    sys.exit(main())

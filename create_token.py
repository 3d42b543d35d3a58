#!/usr/bin/env python3
"""
Print an access token for an existing user, for manual API testing.

The token is signed with JWT_SECRET from the environment, so run this
with the same environment as the server.

Usage:
    python create_token.py --id user_123 --email student@example.com --days 30
"""

import argparse

from roomease_api.app.core.security import issue_token
from roomease_api.app.schemas.user import DEFAULT_ROLE, Identity


def main():
    ap = argparse.ArgumentParser(description="Issue a RoomEase access token.")
    ap.add_argument("--id", required=True, help="User id to embed in the token")
    ap.add_argument("--email", required=True, help="User email to embed in the token")
    ap.add_argument("--role", default=DEFAULT_ROLE, help="Role claim (default: student)")
    ap.add_argument("--days", type=int, default=7, help="Token lifetime in days (default: 7)")
    args = ap.parse_args()

    identity = Identity(id=args.id, email=args.email, role=args.role)
    print(issue_token(identity, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()

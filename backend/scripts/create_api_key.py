"""Issue an API key from the command line.

Admin routes sit behind the key guard, so the first key has to be created
directly against the database. Pass ``--admin`` for a key that may use
the /api/admin routes:

    python scripts/create_api_key.py admin --name "Bootstrap key" --admin
"""

import argparse
import asyncio

from portfolio_api.core.security import generate_api_key
from portfolio_api.core.storage.database import init_db, close_db
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.schemas import AgentIntegrationCreate, ApiKeyCreate


async def create_api_key(
    user_id: str, name: str | None, domains: list[str], agent_id: str, is_admin: bool = False
):
    """Create a key and, optionally, its allowed domains."""
    await init_db()
    storage = get_storage()

    try:
        api_key = await storage.create_api_key(
            ApiKeyCreate(user_id=user_id, name=name, key=generate_api_key(), is_admin=is_admin)
        )
        for domain in domains:
            await storage.create_agent_integration(
                AgentIntegrationCreate(agent_id=agent_id, api_key_id=api_key.id, domain=domain)
            )
    finally:
        await close_db()

    print(f"Created {'admin ' if api_key.is_admin else ''}API key {api_key.id} for {user_id}")
    print(f"  key: {api_key.key}")
    for domain in domains:
        print(f"  allowed domain: {domain}")


def main():
    parser = argparse.ArgumentParser(description="Issue an API key")
    parser.add_argument("user_id", help="Owner of the key")
    parser.add_argument("--name", help="Label for the key")
    parser.add_argument(
        "--domain",
        action="append",
        default=[],
        help="Allowed domain, e.g. example.com or *.example.com (repeatable)",
    )
    parser.add_argument("--agent-id", default="default", help="Agent the domains are registered for")
    parser.add_argument("--admin", action="store_true", help="Allow the key to use the admin routes")
    args = parser.parse_args()

    asyncio.run(create_api_key(args.user_id, args.name, args.domain, args.agent_id, args.admin))


if __name__ == "__main__":
    main()

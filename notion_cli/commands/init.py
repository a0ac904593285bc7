"""Implementation of the ``notion init`` command."""

from __future__ import annotations

from ..core import (
    CliError,
    NotionClient,
    get_base_url,
    load_config,
    print_error,
    print_info,
    print_success,
    save_config,
)
from ..core.interactive import confirm, prompt_token


def verify_connection(client: NotionClient) -> dict:
    """Fetch the bot user and print who we are connected as."""
    try:
        user = client.get("/v1/users/me")
    except CliError as e:
        print_error(f"Connection failed: {e}")
        print_error("Please check your API token and try again.")
        raise

    name = user.get("name") or "Unknown"
    bot_type = user.get("type") or "unknown"
    workspace = (user.get("bot") or {}).get("workspace_name") or "Unknown workspace"
    print_success(f"Connected as {name} ({bot_type})")
    print_success(f"Workspace: {workspace}")
    return user


def cmd_init(args):
    print_info("Notion CLI initialization")

    cfg = load_config()
    token = cfg.get("token") or None
    if token:
        print_info(f"Existing token found ({token[:8]}...)")
        if not confirm("Keep existing token?", default=True):
            token = None

    if token is None:
        print_info("You can create an integration at https://www.notion.so/my-integrations")
        token = prompt_token()

    print_info("Testing connection...")
    client = NotionClient(token, get_base_url(cfg), verbose=getattr(args, "verbose", False))
    verify_connection(client)

    path = save_config(token=token)
    print_success(f"Config saved to {path}")

"""CLI adapter to hide or unhide a token for the configured wallet."""

import sys

from src.infrastructure.container import build_hidden_token_store
from src.infrastructure.logging.logger import get_app_logger


_USAGE = "Usage: hide_token_cli (hide|unhide) <token_address>"


def main(argv: list[str] | None = None) -> None:
    """Hide or unhide a token address.

    Args:
        argv: Command-line arguments without the program name.
    """
    args = sys.argv[1:] if argv is None else argv
    logger = get_app_logger()
    if len(args) != 2 or args[0] not in ("hide", "unhide"):
        print(_USAGE)
        raise SystemExit(2)

    action, address = args
    store = build_hidden_token_store()
    if action == "hide":
        store.hide_token(address)
    else:
        store.unhide_token(address)

    hidden = store.get_hidden_tokens()
    logger.info(f"{action} {address}: {len(hidden)} hidden tokens")
    print(f"{len(hidden)} hidden tokens: {', '.join(sorted(hidden)) or '-'}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Example issue -> validate -> refresh flow driven by environment config."""

from __future__ import annotations

import os

from fumitok import ExpiredError, Tokenizer, TokenizerConfig, generate_key
from fumitok.logging import configure_logging

AUDIENCE_MASK = 0x000F
AUDIENCE_WEB = 0x0001


def require_web(metadata: int) -> bool:
    return metadata == AUDIENCE_WEB


def main() -> None:
    configure_logging(os.getenv("LOG_LEVEL", "info"))
    os.environ.setdefault("FUMITOK_KEY", generate_key())
    config = TokenizerConfig.from_env()
    tokenizer = Tokenizer.from_config(config)

    token = tokenizer.issue(42, AUDIENCE_WEB, mask=AUDIENCE_MASK)
    print("token:", token)

    try:
        claims = tokenizer.validate(token, AUDIENCE_MASK, [require_web])
    except ExpiredError as exc:
        claims = exc.claims
    print("subject:", claims.subject_id, "expires:", claims.expire_at.isoformat())

    refreshed = tokenizer.refresh(token, claims.expire_at + config.ttl, config.refresh_window, AUDIENCE_MASK, [require_web])
    print("refreshed:", refreshed)


if __name__ == "__main__":
    main()

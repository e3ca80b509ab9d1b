import logging
from typing import Optional, Sequence

from cellstyle import env
from cellstyle.theme import demo


def _setup_logging() -> None:
    if not env.logging_enabled():
        # Silence root logger and clear any default handlers when logging is disabled.
        logging.disable(logging.CRITICAL)
        logging.getLogger().handlers.clear()
        return

    level = logging.DEBUG if env.debug_enabled() else logging.INFO
    log_file = env.log_file_path()
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )
    env.log_configuration_once()


def main(argv: Optional[Sequence[str]] = None) -> int:
    _setup_logging()
    return demo.main(argv)


if __name__ == "__main__":
    raise SystemExit(main())

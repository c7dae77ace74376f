from speech_recap_common.logging import build_formatter, setup_logging

__all__ = ["build_formatter", "setup_logging"]

"""Utility modules for errdex.

- clipboard: best-effort access to the OS clipboard
- logging_utils: rotating file logging for the TUI
- output: shared rich console for CLI output
- text_formatting: wrapping and truncation helpers
"""

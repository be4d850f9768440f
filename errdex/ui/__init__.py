"""UI package for the errdex terminal interface.

- text_buffer: multi-line editing engine used by the field editor
- fields: form steps and record field accessors
- result_browser: result selection and scrollable field view
- states / navigator: the modal state machine
- views: text rendering of each screen
- app: Textual application shell
"""

"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
output:
  format: text
  show_tokens: false
  show_general: true

logging:
  level: WARNING

themes:
  default:
    styles:
      short-command: "ansicyan bold"
      long-command: "ansiblue bold"
      argument: "ansigreen"
      general: ""
      image-path: "ansimagenta"
      default: ""
  mono:
    styles:
      short-command: "bold"
      long-command: "bold underline"
      argument: "italic"
      image-path: "reverse"
"""

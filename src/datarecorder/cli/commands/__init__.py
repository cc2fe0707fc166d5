# topmark:header:start
#
#   project      : DataRecorder
#   file         : __init__.py
#   file_relpath : src/datarecorder/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the DataRecorder CLI."""

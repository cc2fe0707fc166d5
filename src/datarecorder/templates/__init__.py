# topmark:header:start
#
#   project      : DataRecorder
#   file         : __init__.py
#   file_relpath : src/datarecorder/templates/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled diff-visualization template (``recording_diff.html``)."""

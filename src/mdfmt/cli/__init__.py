# topmark:header:start
#
#   project      : mdfmt
#   file         : __init__.py
#   file_relpath : src/mdfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The mdfmt developers
#
# topmark:header:end

"""Click-based command-line interface for mdfmt."""

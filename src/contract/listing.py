"""Go listing contract definitions.

This module defines the stable boundary between ``go list`` output and the
record parser: the template requested from the toolchain and the tokens it
emits.
"""

from __future__ import annotations

# Report schema version for JSON output.
REPORT_SCHEMA_VERSION = 1

# Template passed to ``go list -f``. The surrounding apostrophes reach the
# output verbatim because no shell is involved.
LIST_FORMAT = "'{{.Standard}}#{{.ImportPath}}#{{.Module}}#{{.Imports}}'"

RECORD_QUOTE = "'"
FIELD_SEPARATOR = "#"
FIELD_COUNT = 4

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"

# ``{{.Module}}`` renders a nil module as this literal.
NO_MODULE_TOKEN = "<nil>"

# ``{{.Module}}`` renders a replaced module as ``path version => target``.
REPLACEMENT_ARROW = "=>"

DEPS_OPEN = "["
DEPS_CLOSE = "]"

MAIN_PACKAGE_MARKER = "*** "
NO_DEPS_TEXT = "no deps"
NO_VERSION_TEXT = "no version"
MODULES_HEADER = "MODULES:"

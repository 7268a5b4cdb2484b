"""
Internal configuration constants for taskname.

The naming grammar (length limit, separator, alphabet) and the ambient
settings file location are defined here.  The grammar constants are fixed:
they are not read from the settings file.
"""
import string

# ═══════════════════════════════════════════════════════════════
#  Naming Grammar
# ═══════════════════════════════════════════════════════════════
MAX_NAME_LENGTH = 256              # measured in characters (code points)

NAMESPACE_SEPARATOR = "::"
CONSECUTIVE_SEPARATORS = ":::"     # three or more colons in a row

EDGE_CHARS = ("-", "_")            # not allowed at the start/end of a name or part

ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + "-_")

# ═══════════════════════════════════════════════════════════════
#  Settings File
# ═══════════════════════════════════════════════════════════════
ENV_KEY_SETTINGS = "TASKNAME_SETTINGS"      # overrides the settings file path
SETTINGS_FILENAME = "taskname_settings.yaml"

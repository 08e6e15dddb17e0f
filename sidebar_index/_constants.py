"""Common literal values used across sidebar_index.

These constants keep the callback name and default filenames centralized so
the codec, CLI, and tests can import the same values without drifting.

Examples
--------
>>> from sidebar_index import _constants
>>> _constants.SCRIPT_TEMPLATE.format(payload="{}")
'initSidebarItems({});'
"""

SCRIPT_CALLBACK = "initSidebarItems"
SCRIPT_TEMPLATE = SCRIPT_CALLBACK + "({payload});"
SIDEBAR_HTML_FILENAME = "sidebar.html"

"""
Domain types - Text values flowing through a transformation.

All of them are plain immutable ``str``; the aliases only name the stage
a value belongs to.
"""

from collections.abc import Sequence


Name = str
FormattedName = str
ListItem = str
Result = str

NameList = Sequence[Name]

ITEM_SEPARATOR = "\n"
SPECIAL_NAME = "bob"
SPECIAL_DISPLAY_NAME = "BOB"

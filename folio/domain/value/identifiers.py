"""Strongly typed identifiers for Folio domain entities.

All identifiers are database-assigned integers. NewType keeps a ProjectId
from being passed where a UserId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
ProjectId = NewType("ProjectId", int)
SnippetId = NewType("SnippetId", int)
StarId = NewType("StarId", int)
FollowId = NewType("FollowId", int)
NotificationId = NewType("NotificationId", int)

"""Star entity.

Stars are the ledger behind project and snippet star counters.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import StarId, StarTargetType, UserId


class Star(DomainModel):
    """Star entity.

    Business rules:
    - At most one star per (user, target type, target) (database unique constraint)
    - Polymorphic reference to the starred project or snippet
    """

    id: Optional[StarId] = None
    user_id: UserId
    target_type: StarTargetType
    target_id: int  # ProjectId or SnippetId
    created_at: datetime = Field(default_factory=datetime.now)

"""Search event entity."""

from datetime import datetime

from lens.domain.model.common import DomainModel
from lens.domain.value import IdentityId, SearchEventId, SearchTerm


class SearchEvent(DomainModel):
    """One search submitted by an identity.

    Events are append-only. Repeated identical searches are kept as
    separate events so they count separately.
    """

    id: SearchEventId
    identity_id: IdentityId
    term: SearchTerm
    timestamp: datetime

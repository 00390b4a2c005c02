"""Person Service: create, read, version, hide, list and rank persons.

Invariants:
    - Update = hide the old row + insert the new values under a new id, in ONE commit
    - Remove = hide (never a physical delete): invoices keep their references
    - get_person returns hidden rows too (history lookups by id)
    - Default listings exclude hidden persons
    - Statistics drop zero-revenue persons; unknown sort field fails before any query

Design Decisions:
    - Single commit for hide + insert: a failure between the two steps rolls both back,
      so readers never see zero visible versions
    - Pure core (filters, pagination, statistics) sandwiched between repository IO
"""

import logging
from typing import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.domain_types import PersonId
from app.core.errors import ResourceNotFoundError
from app.core.filters import build_person_filters
from app.core.pagination import build_page, parse_page_request
from app.core.repository_protocols import PersonRepository
from app.core.statistics import STATISTICS_SORT_FIELDS, build_statistics_report
from app.models.person import Person
from app.schemas.listing import PaginatedResponse, PersonStatisticsReport
from app.schemas.person import PersonCreate, PersonResponse
from app.services.mappers import person_to_model, person_to_response
from app.services.repositories import PERSON_SORT_COLUMNS, SqlPersonRepository

logger = logging.getLogger(__name__)


class PersonService:
    """Person use cases over one request-scoped DB session."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings
        self.persons: PersonRepository = SqlPersonRepository(db)

    async def _get_or_404(self, person_id: PersonId) -> Person:
        person = await self.persons.find_by_id(person_id)
        if person is None:
            raise ResourceNotFoundError("Person", person_id)
        return person

    async def add_person(self, payload: PersonCreate) -> PersonResponse:
        person = person_to_model(payload)
        person.hidden = False
        await self.persons.save(person)
        await self.db.commit()
        logger.info("Person created", extra={"person_id": person.id})
        return person_to_response(person)

    async def get_person(self, person_id: PersonId) -> PersonResponse:
        return person_to_response(await self._get_or_404(person_id))

    async def update_person(
        self, person_id: PersonId, payload: PersonCreate,
    ) -> PersonResponse:
        """Hide the current version and insert a new one with the new values."""
        existing = await self._get_or_404(person_id)
        existing.hidden = True
        replacement = person_to_model(payload)
        replacement.hidden = False
        await self.persons.save(replacement)
        await self.db.commit()
        logger.info(
            f"Person {person_id} superseded by {replacement.id}",
            extra={"person_id": replacement.id},
        )
        return person_to_response(replacement)

    async def remove_person(self, person_id: PersonId) -> None:
        person = await self._get_or_404(person_id)
        person.hidden = True
        await self.db.commit()
        logger.info("Person hidden", extra={"person_id": person_id})

    async def list_persons(
        self, params: Mapping[str, str],
    ) -> PaginatedResponse[PersonResponse]:
        request = parse_page_request(
            params, PERSON_SORT_COLUMNS,
            default_limit=self.settings.default_page_limit,
            max_limit=self.settings.max_page_limit,
        )
        clauses = build_person_filters(params)
        persons, total = await self.persons.find_all(clauses, request)
        page = build_page(persons, request, total)
        return PaginatedResponse[PersonResponse].from_page(page, person_to_response)

    async def get_person_statistics(
        self, params: Mapping[str, str],
    ) -> PersonStatisticsReport:
        """Revenue per person: top earners + sorted, paginated full list."""
        request = parse_page_request(
            params, STATISTICS_SORT_FIELDS,
            default_limit=self.settings.default_page_limit,
            max_limit=self.settings.max_page_limit,
        )
        rows = await self.persons.revenue_rows(
            include_hidden=self.settings.statistics_include_hidden,
        )
        report = build_statistics_report(
            rows, request, top_n=self.settings.statistics_top_n,
        )
        return PersonStatisticsReport.from_report(report)

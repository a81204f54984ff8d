# app/workflow/status.py
"""
Status lifecycles for quote requests, job listings and applications.

Each table maps a status to the set of statuses it may move to next. A status
with an empty set is terminal. ``LifecycleManager`` is the only code that
writes a ``status`` column after creation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Type

from app.core.errors import ConflictError, InvalidTransition
from app.core.logging_config import logger
from app.domain.enums import ApplicationStatus, JobStatus, QuoteStatus
from app.models import Application, JobListing, QuoteRequest
from app.observability.metrics import transition_counter
from app.services.gateway import Gateway

QUOTE_TRANSITIONS: Dict[QuoteStatus, FrozenSet[QuoteStatus]] = {
    QuoteStatus.NEW: frozenset({QuoteStatus.IN_REVIEW, QuoteStatus.CLOSED}),
    QuoteStatus.IN_REVIEW: frozenset({QuoteStatus.QUOTED, QuoteStatus.CLOSED}),
    QuoteStatus.QUOTED: frozenset({QuoteStatus.IN_REVIEW, QuoteStatus.CLOSED}),
    QuoteStatus.CLOSED: frozenset(),
}

JOB_TRANSITIONS: Dict[JobStatus, FrozenSet[JobStatus]] = {
    JobStatus.DRAFT: frozenset({JobStatus.PUBLISHED}),
    JobStatus.PUBLISHED: frozenset({JobStatus.ARCHIVED, JobStatus.DRAFT}),
    JobStatus.ARCHIVED: frozenset(),
}

APPLICATION_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.NEW: frozenset({ApplicationStatus.REVIEWING, ApplicationStatus.REJECTED}),
    ApplicationStatus.REVIEWING: frozenset({ApplicationStatus.INTERVIEW, ApplicationStatus.REJECTED}),
    ApplicationStatus.INTERVIEW: frozenset({ApplicationStatus.OFFER, ApplicationStatus.REJECTED}),
    ApplicationStatus.OFFER: frozenset({ApplicationStatus.HIRED, ApplicationStatus.REJECTED}),
    ApplicationStatus.REJECTED: frozenset(),
    ApplicationStatus.HIRED: frozenset(),
}


@dataclass(frozen=True)
class Lifecycle:
    entity: str
    model: type
    states: Type[Enum]
    transitions: Mapping[Enum, FrozenSet[Enum]]

    def terminal(self) -> FrozenSet[Enum]:
        return frozenset(s for s, nxt in self.transitions.items() if not nxt)

    def allowed(self, current: Enum, requested: Enum) -> bool:
        return requested in self.transitions.get(current, frozenset())


QUOTE_LIFECYCLE = Lifecycle("quote_request", QuoteRequest, QuoteStatus, QUOTE_TRANSITIONS)
JOB_LIFECYCLE = Lifecycle("job_listing", JobListing, JobStatus, JOB_TRANSITIONS)
APPLICATION_LIFECYCLE = Lifecycle(
    "application", Application, ApplicationStatus, APPLICATION_TRANSITIONS
)


class LifecycleManager:
    def __init__(self, gateway: Gateway):
        self.gateway = gateway

    def _transition(
        self,
        lc: Lifecycle,
        entity_id: str,
        requested,
        changes: Optional[Mapping[str, Any]] = None,
    ):
        requested = lc.states(requested)
        obj = self.gateway.require(lc.model, entity_id)
        current = lc.states(obj.status)

        if not lc.allowed(current, requested):
            transition_counter.labels(entity=lc.entity, result="rejected").inc()
            logger.info(
                "transition_rejected",
                entity=lc.entity,
                id=entity_id,
                current=current.value,
                requested=requested.value,
            )
            raise InvalidTransition(lc.entity, current.value, requested.value)

        # other field edits ride along in the same conditional write
        fields = dict(changes or {})
        fields["status"] = requested.value
        # guarded on the status we just read so concurrent edits can't both win
        if not self.gateway.update_where(lc.model, entity_id, {"status": current.value}, fields):
            transition_counter.labels(entity=lc.entity, result="conflict").inc()
            logger.warning("transition_conflict", entity=lc.entity, id=entity_id)
            raise ConflictError(f"{lc.entity} {entity_id} was changed by someone else, reload and retry")

        transition_counter.labels(entity=lc.entity, result="applied").inc()
        logger.info(
            "transition_applied",
            entity=lc.entity,
            id=entity_id,
            current=current.value,
            requested=requested.value,
        )
        return self.gateway.require(lc.model, entity_id)

    def _edit(
        self,
        lc: Lifecycle,
        entity_id: str,
        requested,
        changes: Mapping[str, Any],
    ):
        """
        Staff edit form: ``requested`` may be the status the record already
        has (the form posts the whole record back), which only saves ``changes``.
        """
        obj = self.gateway.require(lc.model, entity_id)
        if requested is not None and lc.states(requested) != lc.states(obj.status):
            return self._transition(lc, entity_id, requested, changes)
        if changes:
            return self.gateway.update(lc.model, entity_id, changes)
        return obj

    def transition_quote(self, quote_id: str, status: QuoteStatus) -> QuoteRequest:
        return self._transition(QUOTE_LIFECYCLE, quote_id, status)

    def transition_job(
        self, job_id: str, status: JobStatus, changes: Optional[Mapping[str, Any]] = None
    ) -> JobListing:
        return self._transition(JOB_LIFECYCLE, job_id, status, changes)

    def transition_application(
        self,
        application_id: str,
        status: ApplicationStatus,
        changes: Optional[Mapping[str, Any]] = None,
    ) -> Application:
        return self._transition(APPLICATION_LIFECYCLE, application_id, status, changes)

    def edit_job(
        self, job_id: str, status: Optional[JobStatus], changes: Mapping[str, Any]
    ) -> JobListing:
        return self._edit(JOB_LIFECYCLE, job_id, status, changes)

    def edit_application(
        self,
        application_id: str,
        status: Optional[ApplicationStatus],
        changes: Mapping[str, Any],
    ) -> Application:
        return self._edit(APPLICATION_LIFECYCLE, application_id, status, changes)

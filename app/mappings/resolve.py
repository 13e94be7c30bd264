"""
Resolution of external actor values (organization, assignee) to internal
project and user identities.

Lookups are exact matches on the normalized value: case and whitespace
differences are a configuration concern. A miss is not an error; the caller
stores the ticket unmapped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional
from uuid import UUID

from django.conf import settings

from mappings.models import MasterUserMapping, OrganizationMapping, UserMapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    mapping: Optional[OrganizationMapping] = None
    user_email: Optional[str] = None

    @property
    def project_id(self) -> Optional[UUID]:
        return self.mapping.project_id if self.mapping else None


UNMAPPED = Resolution()


def resolve_organization_mapping(source, organization_value: Optional[str]) -> Optional[OrganizationMapping]:
    """Oldest organization mapping for (source, value), or None."""
    if organization_value is None:
        return None

    candidates = list(
        OrganizationMapping.objects.filter(
            source=source,
            source_organization_value=organization_value,
        ).order_by('created_at', 'id')[:2]
    )
    if not candidates:
        return None
    if len(candidates) > 1:
        logger.warning(
            'Organization %r maps to several projects for source %s; using %s',
            organization_value, source, candidates[0].project_id,
        )
    return candidates[0]


def resolve_project(source, organization_value: Optional[str]) -> Optional[UUID]:
    mapping = resolve_organization_mapping(source, organization_value)
    return mapping.project_id if mapping else None


def resolve_user(source, assignee_value: Optional[str],
                 mapping: Optional[OrganizationMapping] = None) -> Optional[str]:
    """
    Resolve an assignee to a user email.
    Order: active master mapping for the source, then user mappings of the
    given organization mapping, then any user mapping under the source.
    """
    if assignee_value is None:
        return None

    master = MasterUserMapping.objects.filter(
        source=source,
        source_assignee_value=assignee_value,
        is_active=True,
    ).first()
    if master:
        return master.mapped_user_email

    scoped = UserMapping.objects.filter(source_assignee_value=assignee_value).order_by('created_at', 'id')
    if mapping is not None:
        user_mapping = scoped.filter(mapping=mapping).first()
        if user_mapping:
            return user_mapping.user_email

    user_mapping = scoped.filter(mapping__source=source).first()
    return user_mapping.user_email if user_mapping else None


def resolve_record(source, record: Mapping[str, Optional[str]]) -> Resolution:
    """Resolve project and user for a normalized record."""
    mapping = resolve_organization_mapping(source, record.get(settings.TICKET_ORGANIZATION_FIELD))
    user_email = resolve_user(source, record.get(settings.TICKET_ASSIGNEE_FIELD), mapping=mapping)
    if mapping is None and user_email is None:
        return UNMAPPED
    return Resolution(mapping=mapping, user_email=user_email)

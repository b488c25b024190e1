"""Models for the review domain.

Defines the ``Review`` entity: a short free-text message a user leaves
about the building management service, stamped with the time it was
written or last edited.
"""

from __future__ import annotations

import uuid

from django.core.validators import MinLengthValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

MESSAGE_MAX_LENGTH = 500


class Review(models.Model):
    """Feedback left by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='reviews'
    )
    message = models.CharField(
        max_length=MESSAGE_MAX_LENGTH,
        validators=[MinLengthValidator(1)],
    )
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _('Review')
        verbose_name_plural = _('Reviews')
        ordering = ['-date']

    def __str__(self) -> str:
        return f"Review by {self.user_id} on {self.date:%Y-%m-%d}"

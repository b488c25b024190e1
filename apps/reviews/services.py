"""Review service.

Administrators manage every review; customers manage only their own, and
the ``*_for_owner`` variants report other users' reviews as missing.
"""

from __future__ import annotations

import logging

from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.users.models import User
from shared.application.actor import require_actor
from shared.domain.exceptions import DomainValidationError, ReviewNotFound, UserNotFound

from .models import MESSAGE_MAX_LENGTH, Review

logger = logging.getLogger(__name__)


def _validate_message(message: str | None) -> str:
    if message is None or not message.strip():
        logger.error("Review message is missing")
        raise DomainValidationError("Message is required.")
    if len(message) > MESSAGE_MAX_LENGTH:
        logger.error(f"Review message is too long: {len(message)} characters")
        raise DomainValidationError(f"Message must be {MESSAGE_MAX_LENGTH} characters or less.")
    return message


class ReviewService:

    @classmethod
    def list_all(cls) -> QuerySet:
        return Review.objects.select_related('user')

    @classmethod
    def list_for_owner(cls, actor) -> QuerySet:
        actor = require_actor(actor)
        return cls.list_all().filter(user_id=actor.pk)

    @classmethod
    def get(cls, review_id) -> Review:
        review = cls.list_all().filter(pk=review_id).first()
        if review is None:
            logger.error(f"Review with id {review_id} was not found in db")
            raise ReviewNotFound(f"Review with id {review_id} not found!")
        return review

    @classmethod
    def get_for_owner(cls, review_id, actor) -> Review:
        review = cls.list_for_owner(actor).filter(pk=review_id).first()
        if review is None:
            logger.error(f"Review with id {review_id} was not found for user {actor.pk}")
            raise ReviewNotFound(f"Review with id {review_id} not found!")
        return review

    @classmethod
    def create(cls, user_id, message: str) -> Review:
        """Admin entry: write a review on behalf of an existing user."""
        message = _validate_message(message)
        if not User.objects.filter(pk=user_id).exists():
            logger.error(f"User with id {user_id} was not found in db")
            raise UserNotFound(f"User with id {user_id} not found!")

        review = Review.objects.create(user_id=user_id, message=message, date=timezone.now())
        logger.info(f"Review with id {review.id} was created for user {user_id}")
        return review

    @classmethod
    def create_for_customer(cls, actor, message: str) -> Review:
        actor = require_actor(actor)
        message = _validate_message(message)
        review = Review.objects.create(user_id=actor.pk, message=message, date=timezone.now())
        logger.info(f"Review with id {review.id} was created by user {actor.pk}")
        return review

    @classmethod
    def update(cls, review_id, message: str) -> Review:
        message = _validate_message(message)
        review = cls.get(review_id)
        review.message = message
        review.save(update_fields=['message'])
        logger.info(f"Review with id {review_id} was updated successfully")
        return review

    @classmethod
    def update_for_owner(cls, review_id, actor, message: str) -> Review:
        """Edit one of the actor's reviews; the date moves to the time of the edit."""
        message = _validate_message(message)
        review = cls.get_for_owner(review_id, actor)
        review.message = message
        review.date = timezone.now()
        review.save(update_fields=['message', 'date'])
        logger.info(f"Review with id {review_id} was updated by user {actor.pk}")
        return review

    @classmethod
    def delete(cls, review_id) -> None:
        deleted, _ = Review.objects.filter(pk=review_id).delete()
        if not deleted:
            logger.error(f"Review with id {review_id} was not found in db")
            raise ReviewNotFound(f"Review with id {review_id} not found!")
        logger.info(f"Review with id {review_id} was deleted successfully")

    @classmethod
    def delete_for_owner(cls, review_id, actor) -> None:
        actor = require_actor(actor)
        deleted, _ = Review.objects.filter(pk=review_id, user_id=actor.pk).delete()
        if not deleted:
            logger.error(f"Review with id {review_id} was not found for user {actor.pk}")
            raise ReviewNotFound(f"Review with id {review_id} not found!")
        logger.info(f"Review with id {review_id} was deleted by user {actor.pk}")

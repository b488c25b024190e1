"""Service-level tests for reviews."""

from __future__ import annotations

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.reviews.models import Review
from apps.reviews.services import ReviewService
from shared.domain.exceptions import AuthenticationRequired, DomainValidationError, ReviewNotFound, UserNotFound

pytestmark = pytest.mark.django_db


def test_customer_review_is_stamped_now(customer):
    before = timezone.now()

    review = ReviewService.create_for_customer(customer, "Very responsive administrators")

    assert review.user_id == customer.pk
    assert review.date >= before


@pytest.mark.parametrize("message", ["", "   ", "x" * 501])
def test_message_length_is_enforced(customer, message):
    with pytest.raises(DomainValidationError):
        ReviewService.create_for_customer(customer, message)


def test_admin_review_requires_existing_user():
    with pytest.raises(UserNotFound):
        ReviewService.create(uuid.uuid4(), "Hello")


def test_owner_update_restamps_date(customer):
    review = ReviewService.create_for_customer(customer, "First impression")
    old_date = timezone.now() - timedelta(days=3)
    Review.objects.filter(pk=review.pk).update(date=old_date)

    updated = ReviewService.update_for_owner(review.pk, customer, "Second impression")

    updated.refresh_from_db()
    assert updated.message == "Second impression"
    assert updated.date > old_date


def test_admin_update_keeps_date(customer):
    review = ReviewService.create_for_customer(customer, "Original")
    old_date = timezone.now() - timedelta(days=3)
    Review.objects.filter(pk=review.pk).update(date=old_date)

    ReviewService.update(review.pk, "Edited by admin")

    review.refresh_from_db()
    assert review.message == "Edited by admin"
    assert review.date == old_date


def test_other_users_reviews_are_hidden(make_customer):
    author, stranger = make_customer(), make_customer()
    review = ReviewService.create_for_customer(author, "Mine")

    with pytest.raises(ReviewNotFound):
        ReviewService.get_for_owner(review.pk, stranger)
    with pytest.raises(ReviewNotFound):
        ReviewService.update_for_owner(review.pk, stranger, "Hijacked")
    with pytest.raises(ReviewNotFound):
        ReviewService.delete_for_owner(review.pk, stranger)

    assert Review.objects.get(pk=review.pk).message == "Mine"


def test_owner_deletes_review(customer):
    review = ReviewService.create_for_customer(customer, "Temporary")

    ReviewService.delete_for_owner(review.pk, customer)

    assert not Review.objects.exists()


def test_listing_for_anonymous_requires_login():
    with pytest.raises(AuthenticationRequired):
        ReviewService.list_for_owner(None)

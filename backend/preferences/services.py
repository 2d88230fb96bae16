# preferences/services.py
import logging

from django.db import transaction

from .models import Preference, PreferenceForm, PreferenceItem

logger = logging.getLogger(__name__)


class PreferenceAlreadySubmitted(Exception):
    pass


def find_form(chair, year, semester):
    """Newest form for the chair and period, or None."""
    return (PreferenceForm.objects
            .filter(chair=chair, year=year, semester=semester)
            .order_by("-created_at", "-id")
            .first())


def form_submissions(form):
    return (Preference.objects
            .filter(form=form)
            .select_related("instructor")
            .prefetch_related("items")
            .order_by("submitted_at", "id"))


@transaction.atomic
def submit_preferences(instructor, form, items):
    """Store a first submission; a second one for the same form is rejected."""
    if Preference.objects.filter(instructor=instructor, form=form).exists():
        raise PreferenceAlreadySubmitted("Preferences already submitted.")
    preference = Preference.objects.create(instructor=instructor, form=form)
    _write_items(preference, items)
    logger.info("Preferences submitted: user %s form %s (%d items)", instructor.pk, form.pk, len(items))
    return preference


@transaction.atomic
def replace_preferences(instructor, form, items):
    """Replace the ranked items of an existing submission. Raises Preference.DoesNotExist."""
    preference = Preference.objects.select_for_update().get(instructor=instructor, form=form)
    preference.items.all().delete()
    _write_items(preference, items)
    preference.save(update_fields=["updated_at"])
    logger.info("Preferences updated: user %s form %s (%d items)", instructor.pk, form.pk, len(items))
    return preference


def _write_items(preference, items):
    PreferenceItem.objects.bulk_create([
        PreferenceItem(preference=preference, course_id=item["courseId"], rank=item["rank"])
        for item in items
    ])

# instructors/ledger.py
import logging

from django.db import transaction
from django.db.models import F, Sum

from .models import WorkloadEntry

logger = logging.getLogger(__name__)


class WorkloadLedger:
    """
    Read/write access to instructors' workload entries.

    Every write goes through `upsert_add` or `subtract`, which find the single
    row for (instructor, year, semester, program) and change it in place. The
    unique constraint on WorkloadEntry backs this up at the database level.
    """

    def entry(self, instructor, year, semester, program=None):
        qs = WorkloadEntry.objects.filter(instructor=instructor, year=year, semester=semester)
        if program is not None:
            qs = qs.filter(program=program)
        return qs.order_by("id").first()

    def get(self, instructor, year, semester, program=None, default=0):
        """
        Current value for the period. Without `program` the first entry
        recorded for (year, semester) is used, whatever its program.
        """
        entry = self.entry(instructor, year, semester, program)
        return entry.value if entry else default

    @transaction.atomic
    def upsert_add(self, instructor, year, semester, program, delta):
        entry, created = WorkloadEntry.objects.get_or_create(
            instructor=instructor,
            year=year,
            semester=semester,
            program=program,
            defaults={"value": delta},
        )
        if not created:
            WorkloadEntry.objects.filter(pk=entry.pk).update(value=F("value") + delta)
            entry.refresh_from_db(fields=["value"])
        logger.debug(
            "Ledger %s %s %s/%s += %.2f -> %.2f",
            instructor.user_id, year, semester, program, delta, entry.value,
        )
        return entry

    @transaction.atomic
    def subtract(self, instructor, year, semester, program, delta, drop_empty=False):
        """
        Remove `delta` from the period, clamping at 0. With `drop_empty` the
        entry is deleted once nothing is left. Returns the entry, or None when
        there was none or it was dropped.
        """
        entry = (WorkloadEntry.objects
                 .select_for_update()
                 .filter(instructor=instructor, year=year, semester=semester, program=program)
                 .first())
        if entry is None:
            return None
        entry.value = max(0, entry.value - delta)
        if drop_empty and entry.value <= 0:
            entry.delete()
            return None
        entry.save(update_fields=["value", "updated_at"])
        return entry

    def sum_where(self, instructor, semesters=None, programs=None, year=None):
        qs = WorkloadEntry.objects.filter(instructor=instructor)
        if semesters is not None:
            qs = qs.filter(semester__in=semesters)
        if programs is not None:
            qs = qs.filter(program__in=programs)
        if year is not None:
            qs = qs.filter(year=year)
        return qs.aggregate(total=Sum("value"))["total"] or 0

    def entries(self, instructor=None, year=None):
        qs = WorkloadEntry.objects.select_related("instructor__user")
        if instructor is not None:
            qs = qs.filter(instructor=instructor)
        if year is not None:
            qs = qs.filter(year=year)
        return qs.order_by("instructor__user__username", "year", "id")

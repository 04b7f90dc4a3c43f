"""Models for synced statistics."""

from __future__ import annotations

from django.db import models  # type: ignore


class CrimeRecord(models.Model):
    """Число преступлений за месяц по муниципалитету и группе преступлений."""

    month = models.CharField(max_length=7, help_text="YYYY-MM")
    municipality_code = models.CharField(max_length=10, help_text="KU-prefixed code, e.g. KU564")
    municipality_name = models.CharField(max_length=100)
    crime_group_code = models.CharField(max_length=20)
    crime_group_name = models.CharField(max_length=200)
    crime_count = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["month", "municipality_code", "crime_group_code"]
        constraints = [
            models.UniqueConstraint(
                fields=["month", "municipality_code", "crime_group_code"],
                name="crime_record_month_municipality_group_uniq",
            ),
        ]
        indexes = [
            models.Index(fields=["municipality_name", "month"], name="crime_record_name_month_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.month} {self.municipality_name} {self.crime_group_code}: {self.crime_count}"

from __future__ import annotations

from django.db import models

from apps.core.models import TimestampedModel


class Category(TimestampedModel):
    title = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["title"]
        verbose_name_plural = "Categories"

    def __str__(self) -> str:
        return self.title


class Component(TimestampedModel):
    title = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name="components",
    )

    class Meta:
        ordering = ["category__title", "title"]

    def __str__(self) -> str:
        return self.title

from django.db import models


class TimestampedModel(models.Model):
    """
    Minimal timestamp mixin shared by the project's concrete models.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

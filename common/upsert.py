"""Create-or-update of one-per-user profile rows."""

from django.db import transaction


def upsert_by_user(model, user_id: int, values: dict, create_values: dict = None):
    """Insert or update the `model` row owned by `user_id`.

    `values` are written on both paths; `create_values` are added only when a
    new row is inserted (e.g. aggregate counters seeded to 0). Relies on the
    unique `user_id` column: a concurrent insert for the same user surfaces as
    an IntegrityError inside `update_or_create`, which then re-reads and
    updates the winning row. Returns ``(instance, created)``.
    """
    with transaction.atomic():
        return model.objects.update_or_create(
            user_id=user_id,
            defaults=values,
            create_defaults={**values, **(create_values or {})},
        )

import logging
from django.db import transaction
from categories.models import CategoryOption, CategoryOptionMigration, ProjectCategory

logger = logging.getLogger(__name__)

DESCRIPTION_OPTIONS_MARKER = 'options:'


def source_key_for(category):
    return f'project_category:{category.pk}'


def extract_options(category):
    """
    Legacy option values for a category, in order.
    The JSON `options` list wins; otherwise a description such as
    "Category with options: a, b, c" is parsed.
    """
    if category.options:
        values = [str(value).strip() for value in category.options]
    elif DESCRIPTION_OPTIONS_MARKER in (category.description or ''):
        tail = category.description.split(DESCRIPTION_OPTIONS_MARKER, 1)[1]
        values = [value.strip() for value in tail.split(',')]
    else:
        values = []

    seen = set()
    ordered = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def migrate_category(category):
    """
    Move one category's legacy options into CategoryOption rows.
    Returns the number of options written, or None when the ledger says the
    category was already migrated.
    """
    source_key = source_key_for(category)
    with transaction.atomic():
        if CategoryOptionMigration.objects.filter(source_key=source_key).exists():
            return None

        values = extract_options(category)
        for sort_order, value in enumerate(values):
            CategoryOption.objects.get_or_create(
                category=category,
                option_value=value,
                defaults={'option_name': value, 'sort_order': sort_order},
            )
        CategoryOptionMigration.objects.create(source_key=source_key, option_count=len(values))
    return len(values)


def migrate_all_categories():
    """
    Run the one-shot option migration over every category.
    Returns (categories_migrated, options_written, categories_skipped).
    """
    migrated = 0
    options_written = 0
    skipped = 0

    for category in ProjectCategory.objects.order_by('created_at', 'id'):
        count = migrate_category(category)
        if count is None:
            skipped += 1
            continue
        migrated += 1
        options_written += count

    logger.info('Category option migration: %d migrated, %d options, %d skipped',
                migrated, options_written, skipped)
    return migrated, options_written, skipped

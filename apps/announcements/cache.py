"""
Cache keys for announcement reads.

Unread counts are cached per student and the announcement list once for
everybody. All keys embed a generation number, so bumping the generation
invalidates every cached announcement read at once.
"""

from django.core.cache import cache as default_cache

GENERATION_KEY = 'announcements:generation'


def generation(cache=None):
    cache = cache or default_cache
    return cache.get_or_set(GENERATION_KEY, 0, timeout=None)


def unread_count_key(student_id, cache=None):
    return f'unread-announcements:{generation(cache)}:{student_id}'


def announcement_list_key(cache=None):
    return f'student-announcements:{generation(cache)}'


def invalidate_announcement_reads(cache=None):
    """Drop cached unread counts and announcement lists for all students."""
    cache = cache or default_cache
    try:
        cache.incr(GENERATION_KEY)
    except ValueError:
        cache.set(GENERATION_KEY, 1, timeout=None)


def invalidate_unread_count(student_id, cache=None):
    cache = cache or default_cache
    cache.delete(unread_count_key(student_id, cache))

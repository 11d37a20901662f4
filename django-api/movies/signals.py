"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from movies.models import Movie
from movies.stores.django_store import LIST_CACHE_KEY, detail_cache_key


@receiver([post_save, post_delete], sender=Movie)
def invalidate_movie_cache(sender, instance, **kwargs):
    """Invalidate caches when a movie is saved or deleted."""
    keys = [LIST_CACHE_KEY, detail_cache_key(instance.pk)]
    cache.delete_many(keys)
    # A reader may refill the cache before the surrounding transaction commits.
    transaction.on_commit(lambda: cache.delete_many(keys))

from django.contrib import admin

from movies.models import Movie


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    list_display = ["name", "genre", "seen", "is_deleted", "created_at"]
    list_filter = ["seen", "is_deleted", "genre"]
    search_fields = ["name", "genre"]
    readonly_fields = ["id", "created_at", "updated_at"]

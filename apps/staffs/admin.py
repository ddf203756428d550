from django.contrib import admin

from .models import Staff


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'email', 'status', 'user_display')
    list_filter = ('status',)
    search_fields = ('surname', 'firstname', 'email')

    def user_display(self, obj):
        if obj.user:
            return obj.user.username
        return "No user"
    user_display.short_description = 'User Account'

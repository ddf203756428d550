from django.db import models
from django.utils.translation import gettext_lazy as _


class Staff(models.Model):
    """Teaching staff member"""

    class Status(models.TextChoices):
        ACTIVE = 'active', _('Active')
        INACTIVE = 'inactive', _('Inactive')

    surname = models.CharField(max_length=200, verbose_name=_("Surname"))
    firstname = models.CharField(max_length=200, verbose_name=_("First Name"))
    other_name = models.CharField(max_length=200, blank=True, verbose_name=_("Other Name"))
    email = models.EmailField(blank=True, verbose_name=_("Email"))
    mobile_number = models.CharField(max_length=20, blank=True, verbose_name=_("Mobile Number"))

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        verbose_name=_("Status")
    )

    # Login account of the teacher; grants access to their own calendar
    user = models.OneToOneField(
        'auth.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='staff_profile'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['surname', 'firstname']
        verbose_name = _('Staff')
        verbose_name_plural = _('Staff')

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        """Get full name"""
        if self.other_name:
            return f"{self.surname} {self.firstname} {self.other_name}"
        return f"{self.surname} {self.firstname}"

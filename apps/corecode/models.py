from django.db import models


class SiteConfig(models.Model):
    """Site Configurations"""

    key = models.SlugField(unique=True)
    value = models.CharField(max_length=200)

    def __str__(self):
        return self.key


class Course(models.Model):
    """Course / programme a student enrols on"""

    name = models.CharField(max_length=200, unique=True)
    code = models.CharField(max_length=20, blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Semester(models.Model):
    """Semester of a course"""

    name = models.CharField(max_length=100)
    course = models.ForeignKey(
        Course, on_delete=models.CASCADE, related_name="semesters"
    )
    current = models.BooleanField(default=False)

    class Meta:
        ordering = ["course__name", "name"]
        constraints = [
            models.UniqueConstraint(fields=["course", "name"], name="unique_semester_per_course"),
        ]

    def __str__(self):
        return f"{self.course} - {self.name}"


class Subject(models.Model):
    """Subject"""

    name = models.CharField(max_length=200, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

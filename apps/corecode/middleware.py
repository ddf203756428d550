from .models import Semester


class SiteWideConfigs:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # None until an administrator flags a current semester
        request.current_semester = (
            Semester.objects.filter(current=True).select_related("course").first()
        )

        response = self.get_response(request)

        return response

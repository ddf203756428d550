from django.contrib.auth.views import LoginView
from django.urls import reverse_lazy


class CustomLoginView(LoginView):
    """Login view that sends every role to its timetable landing page"""
    template_name = 'registration/login.html'
    redirect_authenticated_user = True

    def get_success_url(self):
        # honour ?next= when it is safe, otherwise route by role
        redirect_to = self.get_redirect_url()
        if redirect_to:
            return redirect_to
        return reverse_lazy('timetable:my_schedule')

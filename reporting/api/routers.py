from django.urls import path

from reporting.api.views.stats import CaseStatsView

urlpatterns = [
    path("stats/casos/", CaseStatsView.as_view(), name="stats-casos"),
]

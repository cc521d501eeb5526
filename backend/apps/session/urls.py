from django.urls import path
from .views import HomeView, SetValueView

urlpatterns = [
    path("", HomeView.as_view(), name="index"),
    path("home", HomeView.as_view(), name="home"),
    path("setValue", SetValueView.as_view(), name="set-value"),
]

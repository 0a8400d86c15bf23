from django.urls import path

from .views import LoginAPIView, LogoutAPIView, SignupAPIView

urlpatterns = [
    path('register', SignupAPIView.as_view(), name='register'),
    path('login', LoginAPIView.as_view(), name='login'),
    path('logout', LogoutAPIView.as_view(), name='logout'),
]

# teamassist/asgi.py
import os

from django.core.asgi import get_asgi_application

# Set DJANGO_SETTINGS_MODULE before the application loads
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'teamassist.settings')

application = get_asgi_application()

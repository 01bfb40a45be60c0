"""
WSGI entry point for Azure App Service and container deployments.
Exposes the Flask app for Gunicorn: gunicorn --bind 0.0.0.0:8000 wsgi:app
"""
from app import app

if __name__ == "__main__":
    app.run()

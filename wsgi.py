# wsgi.py
"""
WSGI entry point for the employee records app.
Servers load `application`; `python wsgi.py` runs the development server.
"""

from app import create_app
from config.config import Config

application = create_app()
app = application

if __name__ == "__main__":
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)

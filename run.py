"""
run.py
------
Diagnostics web app entry point. From the project root run:
    python run.py

Then open http://localhost:5000/api/health
"""

import os

from heroku_pg.app import create_app

env = os.getenv("FLASK_ENV", "development")
app = create_app(env)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))

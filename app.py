"""
OpenCall
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the opencall package.
"""

import logging

from opencall import create_app
from opencall.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info("OpenCall is now listening on port %s.", port)
    app.run(host='0.0.0.0', port=port)

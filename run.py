"""
Application entry point with environment-specific server configuration
"""
import sys
import logging
from academy import create_app
from academy.config import Config
from academy.utils.logger import custom_logger, setup_logging

logger = logging.getLogger('academy.run')


@custom_logger.log_function_call
def run_development_server():
    """Run the development server with debug mode and hot reloading"""
    try:
        app = create_app()

        logger.info(f"Starting development server on http://localhost:{Config.PORT} ...")
        app.run(
            host=Config.HOST,
            port=Config.PORT,
            debug=True,
            use_reloader=True
        )
    except Exception as e:
        logger.error(f"Failed to start development server: {str(e)}")
        sys.exit(1)


@custom_logger.log_function_call
def run_production_server():
    """Run the production server based on the operating system"""
    try:
        app = create_app()

        if sys.platform == 'win32':
            # Windows: Use waitress
            try:
                from waitress import serve
                logger.info("Starting production server with waitress...")
                serve(app, host=Config.HOST, port=Config.PORT, threads=8)
            except ImportError:
                logger.error("Please install waitress for Windows production deployment")
                logger.error("Run: pip install waitress")
                sys.exit(1)
        else:
            # Unix/Linux: Use gunicorn
            try:
                import gunicorn.app.base

                class StandaloneApplication(gunicorn.app.base.BaseApplication):
                    def __init__(self, app, options=None):
                        self.options = options or {}
                        self.application = app
                        super().__init__()

                    def load_config(self):
                        for key, value in self.options.items():
                            self.cfg.set(key.lower(), value)

                    def load(self):
                        return self.application

                # single process: the message store lock must see every writer
                options = {
                    'bind': f'{Config.HOST}:{Config.PORT}',
                    'workers': 1,
                    'threads': 8,
                    'worker_class': 'gthread'
                }

                logger.info("Starting production server with gunicorn...")
                StandaloneApplication(app, options).run()

            except ImportError:
                logger.error("Failed to import gunicorn")
                logger.error("Please install gunicorn for Unix/Linux production deployment")
                logger.error("Run: pip install gunicorn")
                sys.exit(1)

    except Exception as e:
        logger.error(f"Failed to start production server: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    setup_logging()
    if Config.IS_PRODUCTION:
        run_production_server()
    else:
        run_development_server()

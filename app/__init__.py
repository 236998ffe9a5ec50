from flask import Flask, render_template
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app():
    # Validate required environment variables
    required_vars = ['SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var):
            raise ValueError(f"Required environment variable {var} is not set")
    
    app = Flask(__name__)
    app.config.from_object('config')
    app.jinja_env.trim_blocks = app.config['JINJA2_TRIM_BLOCKS']
    app.jinja_env.lstrip_blocks = app.config['JINJA2_LSTRIP_BLOCKS']
    
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Initialize extensions
    csrf.init_app(app)
    
    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.tic_tac_toe.routes import tic_tac_toe_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(tic_tac_toe_bp, url_prefix='/tic-tac-toe')
    
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404
    
    return app

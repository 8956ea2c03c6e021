from .home_routes import home_bp
from .food_routes import food_bp
from .entry_routes import entry_bp
from .rotation_routes import rotation_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(entry_bp)
    app.register_blueprint(rotation_bp)

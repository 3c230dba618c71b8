from .core.config import get_port
from .main import create_app

# Create Flask app
app = create_app()

if __name__ == "__main__":
    # Use PORT from environment or default to 5000 for local dev
    app.run(host="0.0.0.0", port=get_port(), debug=True)

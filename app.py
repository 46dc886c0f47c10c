from flask import Flask
from primegen.web import primes_bp

app = Flask(__name__)
app.register_blueprint(primes_bp)

if __name__ == "__main__":
    app.run("127.0.0.1", 8082, debug=True)

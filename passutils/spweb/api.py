import logging

from flask import Flask, jsonify, request

from passutils.config import load_config
from passutils.errors import InvalidOptionError, PassUtilsError
from passutils.generator import generate_password, generate_multiple_passwords

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.errorhandler(PassUtilsError)
def handle_generation_error(e):
    logger.info("Rejected generation request: %s", type(e).__name__)
    return jsonify({"error": str(e), "type": type(e).__name__}), 400

@app.route('/')
def home():
    return jsonify({
        "message": "passutils API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidOptionError("Request body must be a JSON object")
    cfg = load_config()
    length = data.get('length', cfg["length"])
    options = data['options'] if 'options' in data else cfg.get("options")
    requirements = data['requirements'] if 'requirements' in data else cfg.get("requirements")
    if 'amount' in data:
        passwords = generate_multiple_passwords(data['amount'], length, options, requirements)
        return jsonify({'passwords': passwords})
    password = generate_password(length, options, requirements)
    return jsonify({'password': password})

if __name__ == "__main__":
    app.run(debug=True)

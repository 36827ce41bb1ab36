import logging
import os

from flask import Flask, request, jsonify

from chat_service import handle_chat
from constants import CHAT_FALLBACK, INVOICE_CORS_HEADERS
from errors import ValidationError
from invoice_service import handle_generate_invoice
from utils import utc_now

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.sort_keys = False


@app.route("/api/chat", methods=["POST"])
def chat():
    try:
        data = request.get_json(force=True)
        return jsonify(handle_chat(data, utc_now()))

    except ValidationError as e:
        logger.warning("Rejected chat request: %s", e.message)
        return jsonify({"error": e.message}), 400

    except Exception:
        logger.exception("Chat API error")
        return jsonify({
            "error": "Failed to process chat message",
            "response": CHAT_FALLBACK,
        }), 500


@app.route("/api/invoice/generate", methods=["POST", "OPTIONS"])
def generate_invoice():
    if request.method == "OPTIONS":
        return "", 200, INVOICE_CORS_HEADERS

    try:
        data = request.get_json(force=True)
        return jsonify(handle_generate_invoice(data, utc_now()))

    except ValidationError as e:
        logger.warning("Rejected invoice request: %s", e.message)
        return jsonify({"error": e.message}), 400

    except Exception:
        logger.exception("Invoice generation error")
        return jsonify({
            "error": "Failed to generate invoice",
            "details": "Please try again or contact support if the problem persists.",
        }), 500


@app.route("/hc", methods=["GET"])
def health_check():
    return jsonify({"message": "Server is running fine"})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host=os.environ.get("HOST", "0.0.0.0"), port=port)

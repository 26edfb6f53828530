from flask import Flask, jsonify, request
from loguru import logger

from nqueens.config import DEBUG, MAX_BOARD_SIZE, MAX_EXHAUSTIVE_SIZE, PORT, TITLE
from nqueens.exceptions import AllocationError, InvalidBoardSize, InvalidInput, InvalidMode, SizeLimitExceeded
from nqueens.runner import MODE_NAMES, STRATEGIES, report_lines, run_modes, selected_modes, validate_mode, validate_size

app = Flask(__name__)


# ---------------- Request Helpers ---------------- #

def parse_int_arg(name, default=None, error=InvalidInput):
    raw = request.args.get(name)
    if raw is None:
        if default is None:
            raise error(raw)
        return default
    try:
        return int(raw)
    except ValueError:
        raise error(raw)


def check_limits(n, mode):
    """Refuse sizes this server is not configured to run."""
    for m in selected_modes(mode):
        limit = MAX_BOARD_SIZE if m == 4 else MAX_EXHAUSTIVE_SIZE
        if n > limit:
            raise SizeLimitExceeded(n, limit, STRATEGIES[m].label)


# ---------------- Routes ---------------- #

@app.route("/")
def index():
    return jsonify({
        "title": TITLE,
        "modes": {str(m): name for m, name in MODE_NAMES.items()},
        "limits": {"exhaustive": MAX_EXHAUSTIVE_SIZE, "backtracking": MAX_BOARD_SIZE},
    })


@app.route("/solve")
def solve():
    try:
        size = validate_size(parse_int_arg("board_size", error=InvalidBoardSize))
        mode = validate_mode(parse_int_arg("mode", default=4, error=InvalidMode))
        check_limits(size, mode)

        results = []
        for result in run_modes(size, mode):
            entry = result.to_dict()
            entry["report"] = report_lines(result)
            results.append(entry)

        return jsonify({"board_size": size, "mode": mode, "results": results})

    except SizeLimitExceeded as e:
        logger.warning(str(e))
        return jsonify({"error": str(e)}), 422
    except InvalidInput as e:
        logger.warning(str(e))
        return jsonify({"error": str(e)}), 400
    except AllocationError as e:
        logger.error(str(e))
        return jsonify({"error": str(e)}), 500
    except Exception:
        logger.exception("Unexpected error while solving")
        return jsonify({"error": "Server error."}), 500


if __name__ == "__main__":
    app.run(debug=DEBUG, port=PORT)

"""
main.py — Sorting Visualizer Flask App
=======================================
The JSON API that drives the browser visualizer.

Routes:
  GET  /api/algorithms         – metadata cards for every algorithm
  GET  /api/state              – advance playback if due, return state (poll this)
  POST /api/array/generate     – new random array
  POST /api/config/size        – change array size (regenerates)
  POST /api/config/speed       – change playback speed (1–100)
  POST /api/config/algo        – select algorithm
  POST /api/run                – start playback
  POST /api/pause              – toggle pause
  POST /api/reset              – cancel playback
  POST /api/steps              – raw step list for {algo_key, array}
  POST /api/compare            – metrics of two algorithms on the current array

CLI:
  flask --app main replay quick-sort --size 20

State management:
  Each browser session gets a random id in the Flask session cookie.
  The Visualizer for that id lives in an in-memory LRU map (single process;
  could move to Redis for production) holding at most MAX_SESSIONS entries,
  so the least recently used session is dropped first.  Playback advances
  on every /api/state poll, so no background thread is needed.

  POST /api/steps accepts at most MAX_STEPS_ARRAY_SIZE values; the
  recursive generators are only safe on bounded input.

Rejected control actions are not errors: they answer 200 with
"accepted": false, mirroring the disabled buttons of the UI.
"""

from collections import OrderedDict
from flask import Flask, request, jsonify, session
import click
import secrets
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms, generate_steps
from arrays import DEFAULT_ARRAY_SIZE, MAX_ARRAY_SIZE, generate_random_array
from engine import DEFAULT_SPEED, Recorder, Visualizer, compare, create_player


INT_SETTINGS = ("DEFAULT_ARRAY_SIZE", "DEFAULT_SPEED", "MAX_SESSIONS", "MAX_STEPS_ARRAY_SIZE")


def coerce_config(config) -> None:
    """Turn the numeric settings into ints, failing fast on bad env values."""
    for key in INT_SETTINGS:
        value = config[key]
        if isinstance(value, bool):
            raise ValueError(f"{key} must be an integer, got {value!r}")
        try:
            config[key] = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {value!r}") from None
    if config["MAX_SESSIONS"] < 1:
        raise ValueError("MAX_SESSIONS must be at least 1")


app = Flask(__name__)
app.config.update(
    SECRET_KEY=secrets.token_hex(32),
    DEFAULT_ARRAY_SIZE=DEFAULT_ARRAY_SIZE,
    DEFAULT_SPEED=DEFAULT_SPEED,
    MAX_SESSIONS=256,
    MAX_STEPS_ARRAY_SIZE=MAX_ARRAY_SIZE,
)
# e.g. VISUALIZER_DEFAULT_SPEED=80
app.config.from_prefixed_env("VISUALIZER")
coerce_config(app.config)

# sid -> Visualizer, least recently used first
_VISUALIZERS = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_visualizer() -> Visualizer:
    """Look up this session's Visualizer, creating one on first use."""
    sid = session.get("sid")
    if sid is not None and sid in _VISUALIZERS:
        _VISUALIZERS.move_to_end(sid)
        return _VISUALIZERS[sid]

    sid = secrets.token_hex(16)
    session["sid"] = sid
    _VISUALIZERS[sid] = Visualizer(
        array_size=app.config["DEFAULT_ARRAY_SIZE"],
        speed=app.config["DEFAULT_SPEED"],
    )
    app.logger.info("new visualizer session %s", sid)
    while len(_VISUALIZERS) > app.config["MAX_SESSIONS"]:
        old_sid, _ = _VISUALIZERS.popitem(last=False)
        app.logger.info("evicted visualizer session %s", old_sid)
    return _VISUALIZERS[sid]


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _bad_request(message: str):
    app.logger.warning("bad request on %s: %s", request.path, message)
    return jsonify({"error": message}), 400


def _reply(accepted: bool, viz: Visualizer):
    return jsonify({"accepted": accepted, "state": viz.state()})


# ---------------------------------------------------------------------------
# API: Metadata & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([info.to_dict() for info in list_algorithms()])


@app.route("/api/state")
def api_state():
    viz = get_visualizer()
    viz.tick()
    return jsonify(viz.state())


# ---------------------------------------------------------------------------
# API: Array
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    viz = get_visualizer()
    return _reply(viz.generate_array(), viz)


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    size = _body().get("size")
    if not _is_number(size):
        return _bad_request("size must be a number")
    viz = get_visualizer()
    return _reply(viz.set_array_size(int(size)), viz)


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = _body().get("speed")
    if not _is_number(speed):
        return _bad_request("speed must be a number")
    viz = get_visualizer()
    viz.set_speed(speed)
    return _reply(True, viz)


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = _body().get("algo_key")
    if not isinstance(algo_key, str) or not algo_key:
        return _bad_request("algo_key must be a non-empty string")
    viz = get_visualizer()
    return _reply(viz.select_algorithm(algo_key), viz)


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    viz = get_visualizer()
    return _reply(viz.start(), viz)


@app.route("/api/pause", methods=["POST"])
def api_pause():
    viz = get_visualizer()
    return _reply(viz.pause(), viz)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    viz = get_visualizer()
    return _reply(viz.reset(), viz)


# ---------------------------------------------------------------------------
# API: Stateless helpers
# ---------------------------------------------------------------------------
@app.route("/api/steps", methods=["POST"])
def api_steps():
    data  = _body()
    array = data.get("array")
    if not isinstance(array, list) or not all(_is_number(v) for v in array):
        return _bad_request("array must be a list of numbers")
    limit = app.config["MAX_STEPS_ARRAY_SIZE"]
    if len(array) > limit:
        return _bad_request(f"array may hold at most {limit} values")
    steps = generate_steps(str(data.get("algo_key", "")), array)
    return jsonify({"steps": [s.to_dict() for s in steps], "total": len(steps)})


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = _body()
    viz  = get_visualizer()
    recorders = []
    for side in ("left", "right"):
        rec = Recorder()
        try:
            rec.start(str(data.get(side, "")), viz.array)
        except ValueError as e:
            return _bad_request(str(e))
        rec.run_to_completion()
        recorders.append(rec)
    return jsonify(compare(*recorders).to_dict())


# ---------------------------------------------------------------------------
# CLI: terminal replay
# ---------------------------------------------------------------------------
def _format_frame(snap) -> str:
    kind = snap.highlight_kind.value if snap.highlight_kind else ""
    return f"{snap.current_step_index:>5}/{snap.total_steps:<5} {kind:<9} {list(snap.highlighted_indices)}"


@app.cli.command("replay")
@click.argument("algo_key")
@click.option("--size", default=DEFAULT_ARRAY_SIZE, show_default=True, help="Number of elements.")
@click.option("--speed", default=100, show_default=True, help="Playback speed, 1 (slow) to 100 (fast).")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible array.")
def replay_command(algo_key, size, speed, seed):
    """Replay ALGO_KEY on a random array, one line per step."""
    info = get_algorithm(algo_key)
    if info is None:
        keys = ", ".join(a.key for a in list_algorithms())
        raise click.BadParameter(f"choose one of: {keys}", param_hint="ALGO_KEY")

    array = generate_random_array(size, seed=seed)
    click.echo(f"{info.label} on {array}")

    player = create_player(array, speed=speed, on_step=lambda snap: click.echo(_format_frame(snap)))
    player.start(generate_steps(algo_key, array))
    final = player.run()
    click.echo(f"result: {list(final.working_array)}")

    rec = Recorder()
    rec.start(algo_key, array)
    m = rec.run_to_completion()
    click.echo(
        f"comparisons={m.comparisons} swaps={m.swaps} writes={m.writes} "
        f"steps={m.total_steps} sorted={m.is_sorted}"
    )


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)

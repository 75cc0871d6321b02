"""
Flask-based Path Finder Visualizer with clickable graph nodes.

Serves an HTML page (plotly graph + controls) whose selection state lives
in the Flask cookie session, plus a small JSON API for running searches
programmatically.
"""

import logging

from flask import Flask, jsonify, redirect, render_template_string, request, session, url_for

from pathviz.algorithms import ALGORITHMS, ALGORITHM_NAMES, run_algorithm
from pathviz.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_SAMPLE_GRAPH,
    FLASK_HOST,
    FLASK_PORT,
    FLASK_SECRET_KEY,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from pathviz.data.samples import get_sample_graph, list_sample_graphs
from pathviz.graph.model import Graph, GraphIntegrityError, UnknownNodeError
from pathviz.session import (
    SelectionIncompleteError,
    VisualizerSession,
    describe_result,
    format_distance,
)
from ui.components.charts import create_graph_figure

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = FLASK_SECRET_KEY

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Path Finder Visualizer</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; }
        .header h1 { font-size: 1.5rem; }
        .header p { color: #88c0d0; font-size: 14px; }
        .container { max-width: 1200px; margin: 0 auto; padding: 20px; display: grid; grid-template-columns: 1fr 330px; gap: 20px; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 20px; margin-bottom: 20px; }
        h2 { margin-bottom: 12px; color: #1a1a2e; font-size: 1.1rem; }
        select { width: 100%; padding: 8px; border: 2px solid #ddd; border-radius: 8px; margin-bottom: 10px; }
        button { background: #4ecdc4; color: white; border: none; padding: 10px 20px; border-radius: 8px; font-size: 15px; cursor: pointer; width: 100%; margin-bottom: 8px; }
        button:hover { background: #45b7aa; }
        .btn-secondary { background: #95a5a6; }
        .row { display: flex; justify-content: space-between; font-size: 14px; padding: 4px 0; }
        .row .value { font-family: monospace; color: #2980b9; }
        .message { background: #ecf0f1; padding: 10px 15px; border-radius: 8px; margin-bottom: 15px; font-size: 14px; }
        .path span { display: inline-block; background: #d4edda; color: #155724; padding: 3px 10px; border-radius: 12px; margin: 2px; font-family: monospace; }
        .nodes a { display: inline-block; margin: 3px; padding: 4px 10px; border-radius: 6px; background: #ecf0f1; color: #1a1a2e; text-decoration: none; font-size: 13px; }
    </style>
</head>
<body>
<div class="header">
    <h1>Path Finder Visualizer</h1>
    <p>Interactive Graph Algorithm Visualization</p>
</div>
<div class="container">
    <div>
        {% if message %}<div class="message">{{ message }}</div>{% endif %}
        <div class="card">
            {{ figure_html | safe }}
        </div>
        {% if path_labels %}
        <div class="card path">
            <h2>Path Found</h2>
            {% for label in path_labels %}<span>{{ label }}</span>{% if not loop.last %} &rarr; {% endif %}{% endfor %}
        </div>
        {% endif %}
    </div>
    <div>
        <div class="card">
            <h2>Graph &amp; Algorithm</h2>
            <form method="POST" action="{{ url_for('select') }}">
                <select name="graph">
                    {% for name in samples %}<option value="{{ name }}" {% if name == state.graph_name %}selected{% endif %}>{{ name }}</option>{% endfor %}
                </select>
                <select name="algorithm">
                    {% for key, name in algorithms.items() %}<option value="{{ key }}" {% if key == state.algorithm %}selected{% endif %}>{{ name }}</option>{% endfor %}
                </select>
                <button type="submit" class="btn-secondary">Apply</button>
            </form>
        </div>
        <div class="card">
            <h2>Selection</h2>
            <div class="row"><span>Start Node:</span><span class="value">{{ state.start or 'None' }}</span></div>
            <div class="row"><span>End Node:</span><span class="value">{{ state.end or 'None' }}</span></div>
            {% if distance_text %}<div class="row"><span>Distance:</span><span class="value">{{ distance_text }}</span></div>{% endif %}
            <div class="nodes">
                {% for node in nodes %}<a href="{{ url_for('click_node', node_id=node.id) }}">{{ node.label }}</a>{% endfor %}
            </div>
        </div>
        <div class="card">
            <form method="POST" action="{{ url_for('run') }}"><button type="submit">Run Algorithm</button></form>
            <form method="POST" action="{{ url_for('reset') }}"><button type="submit" class="btn-secondary">Reset</button></form>
        </div>
    </div>
</div>
<script>
    // Clicking a node in the plot selects it
    const plot = document.querySelector('.plotly-graph-div');
    if (plot) {
        plot.on('plotly_click', (data) => {
            const point = data.points[0];
            if (point && point.customdata) {
                window.location = '{{ url_for("index") }}node/' + encodeURIComponent(point.customdata);
            }
        });
    }
</script>
</body>
</html>
"""


# =============================================================================
# Session helpers
# =============================================================================

def _load_state() -> VisualizerSession:
    """Visualizer state from the cookie session (fresh state if absent or stale)."""
    data = session.get("visualizer")
    if not data:
        return VisualizerSession()
    try:
        return VisualizerSession.from_dict(data)
    except ValueError:
        # Sample removed or renamed since the cookie was written
        logger.warning(f"Discarding stale visualizer session: {data!r}")
        return VisualizerSession()


def _save_state(state: VisualizerSession, message: str = "") -> None:
    session["visualizer"] = state.to_dict()
    session["message"] = message


# =============================================================================
# HTML routes
# =============================================================================

@app.route("/")
def index():
    """Graph view with the current selection and last result."""
    state = _load_state()
    message = session.pop("message", "")

    figure = create_graph_figure(state.graph, state.result, state.start, state.end)
    figure_html = figure.to_html(full_html=False, include_plotlyjs="cdn")

    path_labels = [state.graph.label_of(n) for n in state.result.path] if state.result else []
    distance_text = format_distance(state.result.distance) if state.result else ""

    return render_template_string(
        PAGE_TEMPLATE,
        state=state,
        message=message,
        figure_html=figure_html,
        path_labels=path_labels,
        distance_text=distance_text,
        nodes=state.graph.nodes,
        samples=list_sample_graphs(),
        algorithms=ALGORITHM_NAMES,
    )


@app.route("/select", methods=["POST"])
def select():
    """Switch sample graph and/or algorithm."""
    state = _load_state()
    message = ""

    graph_name = request.form.get("graph", "").strip()
    if graph_name and graph_name != state.graph_name:
        try:
            state.load_sample(graph_name)
            message = "Sample graph loaded"
        except ValueError as e:
            message = str(e)

    algorithm = request.form.get("algorithm", "").strip()
    if algorithm:
        state.set_algorithm(algorithm)

    _save_state(state, message)
    return redirect(url_for("index"))


@app.route("/node/<node_id>")
def click_node(node_id: str):
    """Toggle a node in the start/end selection."""
    state = _load_state()
    try:
        message = state.handle_node_click(node_id)
    except UnknownNodeError as e:
        message = str(e)
    _save_state(state, message)
    return redirect(url_for("index"))


@app.route("/click")
def click_canvas():
    """Canvas click at (x, y); selects the node under the pointer, if any."""
    state = _load_state()
    x = request.args.get("x", type=float)
    y = request.args.get("y", type=float)

    message = ""
    if x is not None and y is not None:
        node_id = state.handle_canvas_click(x, y)
        if node_id is None:
            message = "No node at that position"
    _save_state(state, message)
    return redirect(url_for("index"))


@app.route("/run", methods=["POST"])
def run():
    state = _load_state()
    try:
        result = state.run()
        message = describe_result(result)
    except SelectionIncompleteError as e:
        message = str(e)
    _save_state(state, message)
    return redirect(url_for("index"))


@app.route("/reset", methods=["POST"])
def reset():
    state = _load_state()
    state.reset()
    _save_state(state, "Reset complete")
    return redirect(url_for("index"))


# =============================================================================
# JSON API
# =============================================================================

@app.route("/api/algorithms")
def api_algorithms():
    algorithms = [cls() for cls in ALGORITHMS.values()]
    return jsonify([
        {
            "id": algorithm.name,
            "name": algorithm.display_name,
            "description": algorithm.description,
            "weighted": algorithm.weighted,
        }
        for algorithm in algorithms
    ])


@app.route("/api/graphs")
def api_graphs():
    return jsonify(list_sample_graphs())


@app.route("/api/graphs/<name>")
def api_graph(name: str):
    try:
        graph = get_sample_graph(name)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify(graph.to_dict())


@app.route("/api/search", methods=["POST"])
def api_search():
    """
    Run one search.

    Body: {"graph": name} or {"graph_data": {...}}, plus "start", "end",
    and optional "algorithm" (default dijkstra) and "strict" (default false).
    """
    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    start = body.get("start")
    end = body.get("end")
    if not start or not end:
        return jsonify({"error": "Both 'start' and 'end' are required"}), 400

    if "graph_data" in body:
        try:
            graph = Graph.from_dict(body["graph_data"])
        except GraphIntegrityError as e:
            return jsonify({"error": str(e)}), 400
    else:
        graph_name = body.get("graph", DEFAULT_SAMPLE_GRAPH)
        if not isinstance(graph_name, str):
            return jsonify({"error": "'graph' must be a sample graph name"}), 400
        try:
            graph = get_sample_graph(graph_name)
        except ValueError as e:
            return jsonify({"error": str(e)}), 404

    try:
        result = run_algorithm(
            body.get("algorithm", DEFAULT_ALGORITHM),
            graph,
            str(start),
            str(end),
            strict=bool(body.get("strict", False)),
        )
    except UnknownNodeError as e:
        return jsonify({"error": str(e)}), 404

    payload = result.to_dict()
    payload["summary"] = describe_result(result)
    return jsonify(payload)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    print("\n=== Path Finder Visualizer ===")
    print(f"Open http://{FLASK_HOST}:{FLASK_PORT} in your browser\n")
    app.run(debug=True, host=FLASK_HOST, port=FLASK_PORT)

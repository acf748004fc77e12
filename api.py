"""
Flask web portal for Kiddy Calc
Serves the calculator screen to a browser and runs each tap through the engine.
The browser owns the calculator state and sends it along with every tap.
"""
from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

import calculator
import config

app = Flask(__name__, static_folder=config.WEB_DIR, static_url_path='')
CORS(app)  # Enable CORS for all routes


def _state_payload(state):
    return {
        'state': calculator.state_to_dict(state),
        'equation': calculator.equation(state),
    }


@app.route('/')
def index():
    """Serve the calculator screen"""
    return send_from_directory(config.WEB_DIR, 'index.html')


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #FFF7FB; color: #4A3B5C;">
        <h1>{config.APP_NAME} API Server</h1>
        <p>API is running! Open the calculator at <a href="/" style="color: #FF5FA2;">Home</a></p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/state" style="color: #FF5FA2;">/api/state</a> - Fresh calculator state</li>
            <li><a href="/api/buttons" style="color: #FF5FA2;">/api/buttons</a> - Button layout</li>
            <li>POST /api/press - Apply one button tap to a state</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/state')
def get_state():
    """Get a fresh calculator state and a title for the page"""
    try:
        data = _state_payload(calculator.INITIAL_STATE)
        data['title'] = config.cute_title()
        return jsonify({'success': True, 'data': data})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/buttons')
def get_buttons():
    """Get the button layout"""
    try:
        rows = []
        for row in config.BUTTON_ROWS + [[config.EQUALS_BUTTON]]:
            rows.append([
                {'label': label, 'color': color, 'emoji': emoji, 'important': important}
                for label, color, emoji, important in row
            ])
        return jsonify({'success': True, 'data': rows, 'count': len(config.all_buttons())})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/press', methods=['POST'])
def press_button():
    """Apply one button tap to the state sent by the page"""
    try:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValueError("Expected a JSON object")
        button = body.get('button')
        if not isinstance(button, str):
            raise ValueError("Expected a button label")

        state = calculator.state_from_dict(body.get('state'))
        state = calculator.press(state, button)
        return jsonify({'success': True, 'data': _state_payload(state)})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


def main():
    print("\n" + "=" * 60)
    print(f"{config.APP_NAME} Web Portal")
    print("=" * 60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("=" * 60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()

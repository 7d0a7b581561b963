#!/usr/bin/env python3
"""
HTTP Server for the elevator system
Exposes the building report as JSON and accepts ride requests and
start/stop/step commands from a browser view
"""
from flask import Flask, jsonify, request
from flask_cors import CORS

from controller.console_controller import NOT_TAKING_REQUESTS
from simulator.core.enums import ElevatorSystemStatus
from simulator.core.exceptions import IllegalStateError


def create_app(controller):
    """
    Build a Flask app bound to one ConsoleController.

    Every route goes through the controller's lock, so the app can run
    in its own thread next to the tick driver.
    """
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    app.config['CONTROLLER'] = controller

    def status_payload():
        report = controller.status()
        payload = report.to_dict()
        payload['text'] = str(report)
        return payload

    @app.route('/api/status')
    def status():
        """Current building report"""
        return jsonify(status_payload())

    @app.route('/api/requests', methods=['POST'])
    def add_request():
        """
        Queue a ride
        JSON body:
            - start: start floor
            - destination: destination floor
        """
        data = request.get_json(silent=True) or {}
        with controller.lock:
            try:
                ride = controller.check_request(data.get('start'), data.get('destination'))
                queued = controller.building.add_request(ride)
            except (ValueError, IllegalStateError) as e:
                return jsonify({'error': str(e)}), 400
        if not queued:
            return jsonify({'error': NOT_TAKING_REQUESTS}), 400
        return jsonify({'queued': str(ride), 'status': status_payload()}), 201

    @app.route('/api/start', methods=['POST'])
    def start():
        """Start a system that is out of service"""
        with controller.lock:
            try:
                started = controller.building.start_elevator_system()
            except IllegalStateError as e:
                return jsonify({'error': str(e)}), 409
        if not started:
            return jsonify({'error': 'Elevator system is already running.'}), 409
        return jsonify(status_payload())

    @app.route('/api/stop', methods=['POST'])
    def stop():
        """Stop a running system"""
        with controller.lock:
            system_status = controller.building.system_status
            if system_status is not ElevatorSystemStatus.RUNNING:
                return jsonify({'error': f'The system is {system_status}. '
                                         'It cannot be stopped now.'}), 409
            controller.building.stop_elevator_system()
        return jsonify(status_payload())

    @app.route('/api/step', methods=['POST'])
    def step():
        """Advance the simulation by one tick"""
        report = controller.tick()
        payload = report.to_dict()
        payload['text'] = str(report)
        return jsonify(payload)

    return app


def run_server(controller, host='localhost', port=5000, debug=False):
    """Run the Flask server"""
    print(f"Starting HTTP server on http://{host}:{port}")
    print(f"API endpoints:")
    print(f"  - GET  /api/status")
    print(f"  - POST /api/requests  {{\"start\": <floor>, \"destination\": <floor>}}")
    print(f"  - POST /api/start")
    print(f"  - POST /api/stop")
    print(f"  - POST /api/step")

    app = create_app(controller)
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)

import json
import logging
from datetime import datetime

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


class Statistics:
    """
    Listens to every message on the broker's broadcast pipe and records
    what the building did, tick by tick, as an independent "recorder".
    Collects all events in JSON Lines format for offline playback.
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.elevator_trajectories = {}  # {elevator_id: [(tick, floor), ...]}
        self.door_events_history = {}  # {elevator_id: [(tick, floor), ...]} door openings
        self.moving_ticks = {}  # {elevator_id: ticks spent moving}
        self.queue_history = []  # [(tick, up, down), ...]
        self.ticks_recorded = 0

        self._last_reports = {}
        self._last_system_status = None

        # JSON Lines event log for offline playback
        self.event_log = []
        self.simulation_metadata = {}

    def _add_event_log(self, event_type, event_data, tick):
        self.event_log.append({
            "time": self.env.now,
            "tick": tick,
            "type": event_type,
            "data": event_data
        })

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration (num_floors, elevators, etc.)
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """SimPy process: record every building/status message"""
        while True:
            data = yield self.broadcast_pipe.get()
            if data.get('topic') == 'building/status':
                message = data['message']
                self.record(message['tick'], message['report'])

    def record(self, tick, report):
        """
        Record one building report.

        Args:
            tick (int): Tick number the report was taken after
            report (dict): BuildingReport.to_dict() output
        """
        self.ticks_recorded += 1

        system_status = report['system_status']
        if system_status != self._last_system_status:
            self._add_event_log('system_status', {
                'from': self._last_system_status,
                'to': system_status
            }, tick)
            self._last_system_status = system_status

        up, down = len(report['up_requests']), len(report['down_requests'])
        self.queue_history.append((tick, up, down))

        for elevator in report['elevators']:
            elevator_id = elevator['elevator_id']
            floor = elevator['current_floor']
            previous = self._last_reports.get(elevator_id)

            self.elevator_trajectories.setdefault(elevator_id, []).append((tick, floor))
            self.door_events_history.setdefault(elevator_id, [])
            self.moving_ticks.setdefault(elevator_id, 0)

            if elevator['status'] == 'MOVING':
                self.moving_ticks[elevator_id] += 1

            door_opened = not elevator['door_closed'] and (
                previous is None or previous['door_closed']
            )
            if door_opened and elevator['status'] == 'MOVING':
                self.door_events_history[elevator_id].append((tick, floor))
                self._add_event_log('door_open', {
                    'elevator': elevator_id,
                    'floor': floor
                }, tick)

            if previous is None or previous['status'] != elevator['status']:
                self._add_event_log('elevator_status', {
                    'elevator': elevator_id,
                    'floor': floor,
                    'status': elevator['status'],
                    'direction': elevator['direction']
                }, tick)

            self._last_reports[elevator_id] = elevator

    def summary(self):
        """
        Aggregate the recorded ticks.

        Returns:
            dict with per-elevator moving ratio and door openings, and
            mean/max lengths of both request queues
        """
        elevators = {}
        for elevator_id in sorted(self.elevator_trajectories):
            samples = len(self.elevator_trajectories[elevator_id])
            elevators[elevator_id] = {
                'moving_ratio': self.moving_ticks[elevator_id] / samples if samples else 0.0,
                'door_openings': len(self.door_events_history[elevator_id])
            }

        if self.queue_history:
            queues = np.array([(up, down) for _, up, down in self.queue_history])
            mean_up, mean_down = queues.mean(axis=0)
            max_up, max_down = queues.max(axis=0)
        else:
            mean_up = mean_down = 0.0
            max_up = max_down = 0

        return {
            'ticks': self.ticks_recorded,
            'elevators': elevators,
            'queues': {
                'mean_up': float(mean_up),
                'mean_down': float(mean_down),
                'max_up': int(max_up),
                'max_down': int(max_down)
            }
        }

    def print_summary(self):
        """Print summary() as a table"""
        result = self.summary()
        print("\n" + "=" * 60)
        print("   ELEVATOR SYSTEM SUMMARY")
        print("=" * 60)
        print(f"Ticks recorded: {result['ticks']}")
        for elevator_id, metrics in result['elevators'].items():
            print(f"  Elevator {elevator_id}: moving {metrics['moving_ratio']:>6.1%}, "
                  f"door openings {metrics['door_openings']:>4}")
        queues = result['queues']
        print(f"Up queue:   mean {queues['mean_up']:>6.2f}, max {queues['max_up']:>4}")
        print(f"Down queue: mean {queues['mean_down']:>6.2f}, max {queues['max_down']:>4}")
        print("=" * 60)

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=False):
        """Draw floor-versus-tick step lines for every elevator after the run"""
        logger.info("[Statistics] Plotting elevator trajectory diagram")
        fig = plt.figure(figsize=(14, 8))

        elevator_colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd', '#8c564b']
        for idx, elevator_id in enumerate(sorted(self.elevator_trajectories)):
            trajectory = self.elevator_trajectories[elevator_id]
            if not trajectory:
                continue
            ticks, floors = zip(*trajectory)
            color = elevator_colors[idx % len(elevator_colors)]
            plt.step(ticks, floors, where='post', label=f"Elevator {elevator_id}",
                     linewidth=2.5, color=color, alpha=0.8)

            door_events = self.door_events_history.get(elevator_id, [])
            if door_events:
                door_ticks, door_floors = zip(*door_events)
                plt.scatter(door_ticks, door_floors, marker='s', s=40, color=color,
                            edgecolors='black', zorder=3)

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Tick")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for trajectory in self.elevator_trajectories.values() for _, floor in trajectory]
        if all_floors:
            plt.yticks(range(min(all_floors), max(all_floors) + 1))
        if self.elevator_trajectories:
            plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close(fig)
        return output_filename

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        with open(filename, 'w', encoding='utf-8') as f:
            # Write metadata as first line
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

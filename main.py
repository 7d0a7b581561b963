import argparse
import logging
import random
import sys
import threading

# Configuration
from config import load_simulation_config

# Simulator components
from simulator.core.building import Building
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment
from simulator.infrastructure.tick_driver import TickDriver
from simulator.traffic import RequestGenerator

# Controller and view
from controller.console_controller import ConsoleController
from controller.console_view import ConsoleView

# Analyzer
from analyzer.statistics import Statistics

DEFAULT_CONFIG = "scenarios/simulation/default.yaml"


def run_simulation(sim_config_path=DEFAULT_CONFIG, serve=False, port=5000,
                   log_path='simulation_log.jsonl',
                   diagram_path='elevator_trajectory_diagram.png'):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
        serve: Also expose the building over HTTP while it runs
        port: Port for the HTTP view
        log_path: Where to write the JSON Lines event log
        diagram_path: Where to save the trajectory diagram

    Returns:
        Final BuildingReport
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    rng = random.Random(sim_config.random_seed)
    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    env = RealtimeEnvironment(speed_factor=sim_config.realtime_factor)
    broker = MessageBroker(env)

    sim_stats = Statistics(env, broker.get_broadcast_pipe())
    sim_stats.set_simulation_metadata(sim_config.to_dict())
    env.process(sim_stats.start_listening())

    building = Building.from_config(sim_config)
    controller = ConsoleController(ConsoleView(), building)
    print(f"Building: {building}")

    driver = TickDriver(env, building, broker=broker,
                        tick_interval=sim_config.tick_interval,
                        lock=controller.lock,
                        on_tick=controller.refresh_view)
    traffic = RequestGenerator(env, building, sim_config.traffic.request_rate,
                               rng=rng, lock=controller.lock)

    if serve:
        from visualizer.http_server import run_server
        http_thread = threading.Thread(target=run_server, args=(controller,),
                                       kwargs={'port': port}, daemon=True)
        http_thread.start()

    controller.start()

    print("\n--- Running ---")
    env.run(until=sim_config.traffic.duration_ticks * sim_config.tick_interval)

    print("\n--- Stopping ---")
    if controller.stop():
        env.run(until=driver.stopped)

    report = controller.status()
    print()
    print(report)
    print(f"Requests generated: {traffic.generated}, queued: {traffic.accepted}, "
          f"rejected: {traffic.rejected}")

    sim_stats.print_summary()
    sim_stats.save_event_log(log_path)
    sim_stats.plot_trajectory_diagram(diagram_path)
    return report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Multi-elevator dispatch simulation")
    parser.add_argument('config', nargs='?', default=DEFAULT_CONFIG,
                        help="simulation configuration YAML file")
    parser.add_argument('--serve', action='store_true',
                        help="expose the building over HTTP while the simulation runs")
    parser.add_argument('--port', type=int, default=5000, help="HTTP port for --serve")
    parser.add_argument('--verbose', '-v', action='store_true', help="log every state transition")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    try:
        run_simulation(args.config, serve=args.serve, port=args.port)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

import argparse
import logging

from homesim.persistence import SQLiteDeviceStore, save_engine
from homesim.sim.config import load_config
from homesim.sim.factory import SimulatorFactory
from homesim.sim.runner import results_to_frame, summarize

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser(description="Simulate one day of a smart home.")
parser.add_argument("--config", default="config/home_config.yaml")
parser.add_argument("--db", default=None, help="Optional SQLite file to save device state to.")
args = parser.parse_args()

config = load_config(args.config)
print("Home simulation configuration loaded successfully.")

runner = SimulatorFactory.create_runner(config)
results = runner.run(hours=config.hours)

for result in results:
    print(f"\n--- Hour {result.hour} ---")
    for entry in result.report.devices:
        print(f"{entry.status.summary()} | consumed {entry.energy_kwh:.3f} kWh")
    print(result.report.summary())

frame = results_to_frame(results)
print(frame[["total_consumption_kwh", "total_generated_kwh", "net_consumption_kwh", "cost_usd"]])
print(f"Daily totals: {summarize(results)}")

if args.db:
    with SQLiteDeviceStore(args.db) as store:
        save_engine(runner.engine, store)

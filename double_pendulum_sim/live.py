import argparse
import logging
import time
from dataclasses import replace

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Slider, Button

from .driver import DriverSettings, SimulationDriver
from .physics import PendulumConfig, bob_positions

logger = logging.getLogger(__name__)

# slider name -> (label, min, max)
SLIDERS = {
    "m1": ("mass-1 (kg)", 0.1, 10.0),
    "m2": ("mass-2 (kg)", 0.1, 10.0),
    "L1": ("rod-1 length (m)", 0.5, 3.0),
    "L2": ("rod-2 length (m)", 0.5, 3.0),
    "damping": ("damping", 0.0, 0.5),
    "g": ("gravity (m/s²)", 0.0, 20.0),
}


def wall_clock_ms():
    return time.perf_counter() * 1000.0


# ------------------------------------------------------------
# Interactive animation GUI
# ------------------------------------------------------------
def run_live(config=None, settings=None, clock=wall_clock_ms, interval=16, start_running=False):
    driver = SimulationDriver(config=(config or PendulumConfig()).validate(), settings=settings)
    sim = {"running": start_running}

    fig = plt.figure(figsize=(10, 7))
    ax = fig.add_axes([0.05, 0.38, 0.5, 0.58])
    ax_hist = fig.add_axes([0.62, 0.55, 0.35, 0.38])
    reach = SLIDERS["L1"][2] + SLIDERS["L2"][2] + 0.2
    ax.set_xlim(-reach, reach)
    ax.set_ylim(-reach, reach)
    ax.set_aspect("equal")
    ax.set_title("Double Pendulum (RK4, sub-stepped)")
    ax_hist.set_title("θ history (deg)")
    ax_hist.set_xlabel("t (s)")

    (trace_line,) = ax.plot([], [], "-", lw=1, color="orange", alpha=0.6)
    (rods,) = ax.plot([], [], "o-", lw=3, color="blue")
    info = ax.text(0.02, 0.95, "", transform=ax.transAxes, va="top", family="monospace")
    (h1,) = ax_hist.plot([], [], color="tab:cyan", label="θ1")
    (h2,) = ax_hist.plot([], [], color="tab:purple", label="θ2")
    ax_hist.legend(loc="upper right")

    # sliders
    sliders = {}
    for i, (name, (label, lo, hi)) in enumerate(SLIDERS.items()):
        s_ax = fig.add_axes([0.25, 0.30 - i * 0.045, 0.6, 0.03], facecolor="lightgoldenrodyellow")
        sliders[name] = Slider(s_ax, label, lo, hi, valinit=getattr(driver.config, name))

    def update_params(val=None):
        new = replace(driver.config, **{name: s.val for name, s in sliders.items()})
        try:
            driver.set_config(new.validate())
        except ValueError as exc:
            logger.warning("ignoring parameter change: %s", exc)

    for s in sliders.values():
        s.on_changed(update_params)

    # buttons
    b_start = Button(fig.add_axes([0.62, 0.40, 0.1, 0.05]), "▶ / ❚❚")
    b_reset = Button(fig.add_axes([0.75, 0.40, 0.1, 0.05]), "Reset")

    def toggle_run(event):
        sim["running"] = not sim["running"]
        logger.info("running=%s", sim["running"])

    def reset(event):
        driver.reset()
        draw()

    b_start.on_clicked(toggle_run)
    b_reset.on_clicked(reset)

    def draw():
        state, cfg = driver.state, driver.config
        x1, y1, x2, y2 = bob_positions(state, cfg)
        rods.set_data([0, x1, x2], [0, y1, y2])
        trace = driver.trace
        trace_line.set_data([p[0] for p in trace], [p[1] for p in trace])
        e = driver.energy()
        info.set_text(f"t = {state.time:6.2f} s\n"
                      f"V = {e.pe:8.2f} J\nT = {e.ke:8.2f} J\nE = {e.total:8.3f} J")
        history = driver.history
        if history:
            ts = [p.time for p in history]
            h1.set_data(ts, [p.theta1 for p in history])
            h2.set_data(ts, [p.theta2 for p in history])
            ax_hist.relim()
            ax_hist.autoscale_view()
        return rods, trace_line, info, h1, h2

    # animation update
    def update(frame):
        driver.tick(clock(), sim["running"])
        return draw()

    # keep reference so the animation is not garbage collected
    anim = FuncAnimation(fig, update, interval=interval, blit=False, cache_frame_data=False)
    plt.show()
    return anim


def main(argv=None):
    p = argparse.ArgumentParser(description="Live double pendulum simulation.")
    p.add_argument("--substeps", type=int, default=DriverSettings.substeps)
    p.add_argument("--max-frame-dt", type=float, default=DriverSettings.max_frame_dt)
    p.add_argument("--damping", type=float, default=PendulumConfig.damping)
    p.add_argument("--log-level", default="INFO")
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = DriverSettings(substeps=args.substeps, max_frame_dt=args.max_frame_dt)
    run_live(config=PendulumConfig(damping=args.damping), settings=settings)


if __name__ == "__main__":
    main()

"""
Basic SkewT Chart Example

This example demonstrates how to draw a SkewT-logP diagram with the
SkewTCharts package. It loads a radiosonde ascent from a JSON file, renders
the chart to PNG, exports an SVG through a custom download handler, and
prints a probe readout for a pressure level.

Output: output/SkewT-Payerne-Radiosonde.png and output/SkewT-Payerne-Radiosonde.svg
"""

from pathlib import Path

from skewt_charts import (
    Config,
    RenderError,
    SkewTChart,
    SoundingDataError,
    load_sounding,
    probe_sounding,
)

# ============================================================================
# Basic Chart Generation
# ============================================================================

sounding_path = Path(__file__).with_name("sample_sounding.json")
output_dir = Path("output")

config = Config(speed_unit="kt", output_dir=output_dir)

print("Creating SkewT chart:")
print(f"  Sounding: {sounding_path}")
print(f"  Size: {config.width}x{config.height} px")
print(f"  Wind unit: {config.speed_unit}")
print()

sounding = None

try:
    sounding = load_sounding(sounding_path)

    chart = SkewTChart(config)
    chart.render_chart(sounding.profile, sounding.site, sounding.source)

    png_path = chart.export()

    svg_path = output_dir / "SkewT-Payerne-Radiosonde.svg"
    chart.export(
        on_download=svg_path.write_text,
        on_error=lambda e: print(f"SVG export failed: {e}"),
    )
    chart.close()

    print(f"Success! Chart saved to: {png_path}")
    print(f"SVG saved to: {svg_path}")
    print()
    print("The chart displays:")
    print("  - Skewed isotherms (0 °C emphasized), isobars and dry adiabats")
    print("  - Temperature (red) and dew point (green) profiles")
    print("  - Wind barbs along the right edge")

except SoundingDataError as e:
    print(f"Error loading sounding: {e}")

except RenderError as e:
    print(f"Error creating chart (render failed): {e}")

# ============================================================================
# Probe Readout
# ============================================================================

readout = probe_sounding(sounding.profile, pressure=780, config=config) if sounding else None
if readout is not None:
    print()
    print(f"Nearest sample to 780 hPa: {readout.sample.pressure:g} hPa")
    for name, channel in (
        ("Temperature", readout.temperature),
        ("Dew point", readout.dew_point),
        ("Height", readout.height),
        ("Wind speed", readout.wind_speed),
    ):
        print(f"  {name}: {channel.text if channel is not None else 'n/a'}")


# ============================================================================
# Interactive Display (Optional)
# ============================================================================

# Uncomment the following section to hover over the chart and read values
# off the nearest sample:

"""
import matplotlib.pyplot as plt

chart = SkewTChart(config)
fig, ax = chart.render_chart(sounding.profile, sounding.site, sounding.source, interactive=True)
plt.show()
"""

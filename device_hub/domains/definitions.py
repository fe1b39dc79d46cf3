"""Built-in property domain definitions.

Each domain lists the state a device reports, the command payload it
accepts, and the feature and role vocabulary devices draw from.
"""

from __future__ import annotations

from device_hub.core.models.domain import FieldDef, PropertyDomain, QueryableDef

# =============================================================================
# ACTUATED DOMAINS
# =============================================================================

ILLUMINATION = PropertyDomain(
    name="illumination",
    display_name="Illumination",
    state_fields={
        "on": FieldDef(type="boolean", description="Whether the light is on"),
        "brightness": FieldDef(type="number", description="Brightness level 0-100", min=0, max=100),
        "color_temp": FieldDef(
            type="number", description="Color temperature in mireds", min=153, max=500
        ),
        "color": FieldDef(
            type="object", description="Color as {h, s} (hue 0-360, saturation 0-100)"
        ),
    },
    command_fields={
        "on": FieldDef(type="boolean"),
        "brightness": FieldDef(type="number", min=0, max=100),
        "color_temp": FieldDef(type="number", min=153, max=500),
        "color": FieldDef(type="object"),
        "transition": FieldDef(type="number", description="Transition time in seconds", min=0),
    },
    features=["dimmable", "color_temp", "color", "effect"],
    roles=["primary", "ambient", "accent", "task", "night_light"],
)

CLIMATE = PropertyDomain(
    name="climate",
    display_name="Climate",
    state_fields={
        "current_temp": FieldDef(type="number", description="Current temperature in C"),
        "target_temp": FieldDef(type="number", description="Target temperature in C"),
        "humidity": FieldDef(type="number", description="Relative humidity %", min=0, max=100),
        "mode": FieldDef(type="string", description="HVAC mode: heat, cool, auto, off"),
        "fan_mode": FieldDef(type="string", description="Fan speed: auto, low, medium, high"),
    },
    command_fields={
        "target_temp": FieldDef(type="number"),
        "mode": FieldDef(type="string", values=("heat", "cool", "auto", "off")),
        "fan_mode": FieldDef(type="string", values=("auto", "low", "medium", "high")),
    },
    features=["heating", "cooling", "fan", "humidity_sensing", "thermostat"],
    roles=["primary", "supplementary", "sensor"],
)

ACCESS = PropertyDomain(
    name="access",
    display_name="Access",
    state_fields={
        "locked": FieldDef(type="boolean", description="Whether the lock is engaged"),
        "open": FieldDef(type="boolean", description="Whether the door/window is open"),
        "position": FieldDef(type="number", description="Cover position 0-100", min=0, max=100),
    },
    command_fields={
        "locked": FieldDef(type="boolean"),
        "open": FieldDef(type="boolean"),
        "position": FieldDef(type="number", min=0, max=100),
    },
    features=["lock", "contact", "cover", "tilt"],
    roles=["door", "window", "gate", "blind", "curtain"],
)

MEDIA = PropertyDomain(
    name="media",
    display_name="Media",
    state_fields={
        "playing": FieldDef(type="boolean", description="Whether media is playing"),
        "volume": FieldDef(type="number", description="Volume 0-100", min=0, max=100),
        "muted": FieldDef(type="boolean", description="Whether audio is muted"),
        "source": FieldDef(type="string", description="Current media source"),
        "title": FieldDef(type="string", description="Current media title"),
        "artist": FieldDef(type="string", description="Current artist"),
    },
    command_fields={
        "playing": FieldDef(type="boolean"),
        "volume": FieldDef(type="number", min=0, max=100),
        "muted": FieldDef(type="boolean"),
        "source": FieldDef(type="string"),
    },
    features=["playback", "volume", "source_select", "grouping"],
    roles=["speaker", "tv", "receiver", "soundbar"],
)

POWER = PropertyDomain(
    name="power",
    display_name="Power",
    state_fields={
        "on": FieldDef(type="boolean", description="Whether the outlet/switch is on"),
        "watts": FieldDef(type="number", description="Current power draw in watts"),
        "kwh": FieldDef(type="number", description="Total energy consumed in kWh"),
        "voltage": FieldDef(type="number", description="Current voltage"),
        "current": FieldDef(type="number", description="Current amperage"),
    },
    command_fields={
        "on": FieldDef(type="boolean"),
    },
    features=["switch", "power_monitoring", "energy_tracking"],
    roles=["outlet", "switch", "meter", "circuit"],
)

WATER = PropertyDomain(
    name="water",
    display_name="Water",
    state_fields={
        "flow_rate": FieldDef(type="number", description="Current flow in liters/min"),
        "total_consumption": FieldDef(type="number", description="Total consumption in liters"),
        "leak_detected": FieldDef(type="boolean", description="Whether a leak is detected"),
        "valve_open": FieldDef(type="boolean", description="Whether the valve is open"),
        "temperature": FieldDef(type="number", description="Water temperature in C"),
    },
    command_fields={
        "valve_open": FieldDef(type="boolean"),
    },
    features=["flow_sensing", "leak_detection", "valve_control", "temp_sensing"],
    roles=["main_valve", "irrigation", "sensor", "heater"],
)

SAFETY = PropertyDomain(
    name="safety",
    display_name="Safety",
    state_fields={
        "triggered": FieldDef(type="boolean", description="Whether the alarm is triggered"),
        "smoke_detected": FieldDef(type="boolean", description="Smoke sensor status"),
        "co_detected": FieldDef(type="boolean", description="Carbon monoxide detected"),
        "battery_level": FieldDef(
            type="number", description="Battery level 0-100", min=0, max=100
        ),
    },
    command_fields={
        "silence": FieldDef(type="boolean", description="Silence the alarm"),
        "test": FieldDef(type="boolean", description="Trigger a test alarm"),
    },
    features=["smoke", "co", "heat", "siren", "battery_monitoring"],
    roles=["smoke_detector", "co_detector", "siren", "combined"],
)

AIR_QUALITY = PropertyDomain(
    name="air_quality",
    display_name="Air Quality",
    state_fields={
        "co2": FieldDef(type="number", description="CO2 level in ppm"),
        "pm25": FieldDef(type="number", description="PM2.5 in ug/m3"),
        "pm10": FieldDef(type="number", description="PM10 in ug/m3"),
        "voc": FieldDef(type="number", description="VOC index"),
        "aqi": FieldDef(type="number", description="Air quality index"),
        "fan_on": FieldDef(type="boolean", description="Whether the purifier fan is on"),
        "fan_speed": FieldDef(type="number", description="Fan speed 0-100", min=0, max=100),
    },
    command_fields={
        "fan_on": FieldDef(type="boolean"),
        "fan_speed": FieldDef(type="number", min=0, max=100),
        "mode": FieldDef(type="string", description="auto, manual, sleep", values=("auto", "manual", "sleep")),
    },
    features=["co2_sensing", "pm_sensing", "voc_sensing", "purification"],
    roles=["sensor", "purifier", "ventilation"],
)

# =============================================================================
# READ-ONLY DOMAINS
# =============================================================================

OCCUPANCY = PropertyDomain(
    name="occupancy",
    display_name="Occupancy",
    state_fields={
        "occupied": FieldDef(type="boolean", description="Whether space is occupied"),
        "count": FieldDef(type="number", description="Number of people detected", min=0),
        "last_motion": FieldDef(type="number", description="Timestamp of last motion"),
    },
    command_fields={},
    features=["motion", "presence", "count", "face_recognition"],
    roles=["detector", "camera", "pressure_mat"],
)

# =============================================================================
# QUERYABLE DOMAINS
# =============================================================================

_TIME_RANGE_PARAMS = {
    "from": FieldDef(type="number", description="Start of time range (epoch ms)"),
    "to": FieldDef(type="number", description="End of time range (epoch ms)"),
}

SCHEDULE = PropertyDomain(
    name="schedule",
    display_name="Schedule",
    state_fields={
        "active": FieldDef(type="boolean", description="Whether any event is happening right now"),
        "current_event": FieldDef(type="object", description="Currently active event (if any)"),
        "next_event": FieldDef(type="object", description="Next upcoming event"),
        "event_count": FieldDef(type="number", description="Total number of events in the calendar"),
    },
    command_fields={
        "create_event": FieldDef(
            type="object",
            description="Create a new event: { summary, start, end, description?, location?, all_day? }",
        ),
        "update_event": FieldDef(
            type="object",
            description="Update an event: { uid, summary?, start?, end?, description?, location? }",
        ),
        "delete_event": FieldDef(type="object", description="Delete an event: { uid }"),
    },
    features=["events", "recurring", "reminders", "create", "update", "delete"],
    roles=["calendar", "booking", "availability"],
    queryable=QueryableDef(
        params=_TIME_RANGE_PARAMS,
        item_fields={
            "uid": FieldDef(type="string", description="Unique event identifier"),
            "summary": FieldDef(type="string", description="Event title"),
            "description": FieldDef(type="string", description="Event description"),
            "location": FieldDef(type="string", description="Event location"),
            "start": FieldDef(type="number", description="Start time (epoch ms)"),
            "end": FieldDef(type="number", description="End time (epoch ms)"),
            "all_day": FieldDef(type="boolean", description="Whether this is an all-day event"),
            "recurring": FieldDef(type="boolean", description="Whether this is a recurring event"),
        },
        description="Query calendar events within a time range",
    ),
)

_WEATHER_FIELDS = {
    "temperature": FieldDef(type="number", description="Temperature in C"),
    "apparent_temperature": FieldDef(type="number", description="Feels-like temperature in C"),
    "humidity": FieldDef(type="number", description="Relative humidity 0-1", min=0, max=1),
    "condition": FieldDef(
        type="string",
        description="clear, partly-cloudy, cloudy, rain, snow, sleet, wind, fog",
    ),
    "wind_speed": FieldDef(type="number", description="Wind speed in m/s"),
    "wind_bearing": FieldDef(type="number", description="Wind direction in degrees", min=0, max=360),
    "wind_gust": FieldDef(type="number", description="Wind gust speed in m/s"),
    "pressure": FieldDef(type="number", description="Sea-level pressure in hPa"),
    "cloud_cover": FieldDef(type="number", description="Cloud cover 0-1", min=0, max=1),
    "uv_index": FieldDef(type="number", description="UV index"),
    "precip_intensity": FieldDef(type="number", description="Precipitation in mm/h"),
    "precip_probability": FieldDef(
        type="number", description="Precipitation probability 0-1", min=0, max=1
    ),
}

WEATHER = PropertyDomain(
    name="weather",
    display_name="Weather",
    state_fields=_WEATHER_FIELDS,
    command_fields={},
    features=["current", "hourly_forecast", "daily_forecast", "alerts"],
    roles=["outdoor", "forecast"],
    queryable=QueryableDef(
        params={
            **_TIME_RANGE_PARAMS,
            "granularity": FieldDef(
                type="string",
                description="Forecast granularity",
                values=("hourly", "daily"),
            ),
        },
        item_fields={
            "id": FieldDef(type="string", description="Forecast item identifier"),
            "start": FieldDef(type="number", description="Start of the period (epoch ms)"),
            "end": FieldDef(type="number", description="End of the period (epoch ms)"),
            "granularity": FieldDef(type="string", description="hourly or daily"),
            "temperature_low": FieldDef(type="number", description="Daily low in C"),
            **_WEATHER_FIELDS,
        },
        description="Query forecast periods within a time range",
    ),
)

ALL_DOMAINS: tuple[PropertyDomain, ...] = (
    ILLUMINATION,
    CLIMATE,
    OCCUPANCY,
    ACCESS,
    MEDIA,
    POWER,
    WATER,
    SAFETY,
    AIR_QUALITY,
    SCHEDULE,
    WEATHER,
)

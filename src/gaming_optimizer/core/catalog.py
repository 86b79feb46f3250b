"""Static seed catalog for the mock machine.

Simulates the Windows startup entries and gaming tweaks the dashboard
manages. Every seed call builds fresh model instances, so stores created
from it never share entries.
"""

from __future__ import annotations

from .models import (
    Impact,
    OptimizationSetting,
    ProgramCategory,
    SettingCategory,
    StartupProgram,
    SystemInfo,
)

STARTUP_PROGRAM_CATALOG: list[dict] = [
    {"id": "1", "name": "Microsoft Teams", "publisher": "Microsoft Corporation", "path": "C:\\Users\\AppData\\Local\\Microsoft\\Teams\\Update.exe", "impact": Impact.HIGH, "category": ProgramCategory.UTILITY, "description": "Collaboration and messaging application"},
    {"id": "2", "name": "Spotify", "publisher": "Spotify AB", "path": "C:\\Users\\AppData\\Roaming\\Spotify\\Spotify.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.BLOATWARE, "description": "Music streaming service - not needed at startup"},
    {"id": "3", "name": "Discord", "publisher": "Discord Inc.", "path": "C:\\Users\\AppData\\Local\\Discord\\Update.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.GAMING, "description": "Voice and text chat for gamers"},
    {"id": "4", "name": "Steam Client Bootstrapper", "publisher": "Valve Corporation", "path": "C:\\Program Files (x86)\\Steam\\steam.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.GAMING, "description": "Steam gaming platform launcher"},
    {"id": "5", "name": "NVIDIA GeForce Experience", "publisher": "NVIDIA Corporation", "path": "C:\\Program Files\\NVIDIA Corporation\\NVIDIA GeForce Experience\\NVIDIA GeForce Experience.exe", "impact": Impact.HIGH, "category": ProgramCategory.GAMING, "description": "Driver updates and game optimization"},
    {"id": "6", "name": "OneDrive", "publisher": "Microsoft Corporation", "path": "C:\\Users\\AppData\\Local\\Microsoft\\OneDrive\\OneDrive.exe", "impact": Impact.HIGH, "category": ProgramCategory.BLOATWARE, "description": "Cloud storage sync - can slow boot significantly"},
    {"id": "7", "name": "Adobe Creative Cloud", "publisher": "Adobe Inc.", "path": "C:\\Program Files\\Adobe\\Adobe Creative Cloud\\ACC\\Creative Cloud.exe", "impact": Impact.HIGH, "category": ProgramCategory.BLOATWARE, "description": "Adobe applications manager - heavy resource usage"},
    {"id": "8", "name": "iTunes Helper", "publisher": "Apple Inc.", "path": "C:\\Program Files\\iTunes\\iTunesHelper.exe", "impact": Impact.LOW, "category": ProgramCategory.BLOATWARE, "description": "iTunes device detection - unnecessary for most users"},
    {"id": "9", "name": "Windows Security", "publisher": "Microsoft Corporation", "path": "C:\\Windows\\System32\\SecurityHealthSystray.exe", "impact": Impact.LOW, "category": ProgramCategory.ESSENTIAL, "description": "Windows Defender - essential security protection"},
    {"id": "10", "name": "Realtek HD Audio Manager", "publisher": "Realtek Semiconductor", "path": "C:\\Program Files\\Realtek\\Audio\\HDA\\RtkNGUI64.exe", "impact": Impact.LOW, "category": ProgramCategory.ESSENTIAL, "description": "Audio driver management utility"},
    {"id": "11", "name": "Corsair iCUE", "publisher": "Corsair", "path": "C:\\Program Files\\Corsair\\CORSAIR iCUE 4 Software\\iCUE.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.GAMING, "description": "RGB lighting and peripheral control"},
    {"id": "12", "name": "Razer Synapse", "publisher": "Razer Inc.", "path": "C:\\Program Files (x86)\\Razer\\Synapse3\\WPFUI\\Framework\\Razer Synapse 3.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.GAMING, "description": "Gaming peripheral configuration"},
    {"id": "13", "name": "Dropbox", "publisher": "Dropbox, Inc.", "path": "C:\\Program Files\\Dropbox\\Client\\Dropbox.exe", "impact": Impact.HIGH, "category": ProgramCategory.BLOATWARE, "description": "Cloud storage sync service"},
    {"id": "14", "name": "Skype", "publisher": "Microsoft Corporation", "path": "C:\\Program Files\\WindowsApps\\Microsoft.SkypeApp\\Skype.exe", "impact": Impact.MEDIUM, "category": ProgramCategory.BLOATWARE, "description": "Video calling application"},
    {"id": "15", "name": "Java Update Scheduler", "publisher": "Oracle Corporation", "path": "C:\\Program Files\\Java\\jre\\bin\\jusched.exe", "impact": Impact.LOW, "category": ProgramCategory.BLOATWARE, "description": "Java runtime update checker"},
]

OPTIMIZATION_SETTING_CATALOG: list[dict] = [
    {"id": "game-mode", "name": "Windows Game Mode", "description": "Prioritizes game processes and reduces background activity", "category": SettingCategory.PERFORMANCE, "recommended": True, "impact": "Improves FPS stability by 5-15%"},
    {"id": "hardware-accel", "name": "Hardware-Accelerated GPU Scheduling", "description": "Reduces latency and improves GPU performance", "category": SettingCategory.PERFORMANCE, "recommended": True, "impact": "Reduces input lag by 1-3ms"},
    {"id": "disable-fullscreen-opt", "name": "Disable Fullscreen Optimizations", "description": "Prevents Windows from optimizing fullscreen games", "category": SettingCategory.PERFORMANCE, "recommended": True, "impact": "Fixes stuttering in some games"},
    {"id": "high-perf-power", "name": "High Performance Power Plan", "description": "Maximizes CPU and GPU performance at the cost of power consumption", "category": SettingCategory.POWER, "recommended": True, "impact": "Up to 20% performance boost on laptops"},
    {"id": "disable-nagle", "name": "Disable Nagle's Algorithm", "description": "Reduces network latency for online gaming", "category": SettingCategory.NETWORK, "recommended": True, "impact": "Reduces ping by 5-20ms"},
    {"id": "disable-auto-update", "name": "Pause Windows Updates During Gaming", "description": "Temporarily pauses Windows Update to prevent interruptions", "category": SettingCategory.PERFORMANCE, "recommended": True, "impact": "Prevents update-related lag spikes"},
    {"id": "disable-transparency", "name": "Disable Transparency Effects", "description": "Turns off Windows transparency and blur effects", "category": SettingCategory.VISUAL, "recommended": False, "impact": "Frees up 50-150MB VRAM"},
    {"id": "disable-animations", "name": "Disable UI Animations", "description": "Removes Windows animation effects for snappier feel", "category": SettingCategory.VISUAL, "recommended": False, "impact": "Minimal performance impact, faster UI"},
    {"id": "disable-dvr", "name": "Disable Xbox Game DVR", "description": "Turns off background game recording", "category": SettingCategory.PERFORMANCE, "recommended": True, "impact": "Recovers 5-10% FPS in many games"},
    {"id": "clean-temp", "name": "Clean Temporary Files", "description": "Removes temporary files to free up disk space", "category": SettingCategory.STORAGE, "recommended": True, "impact": "Frees 1-10GB of storage"},
    {"id": "disable-superfetch", "name": "Disable Superfetch/SysMain", "description": "Stops Windows from preloading applications into memory", "category": SettingCategory.PERFORMANCE, "recommended": False, "impact": "Reduces disk usage, may slow app launches"},
    {"id": "disable-search-indexing", "name": "Disable Windows Search Indexing", "description": "Stops background file indexing to reduce disk I/O", "category": SettingCategory.STORAGE, "recommended": False, "impact": "Reduces disk activity, slower searches"},
]

SYSTEM_INFO: dict[str, str] = {
    "os": "Windows 11 Pro (Build 22621)",
    "cpu": "AMD Ryzen 7 5800X @ 3.80GHz",
    "ram": "32GB DDR4 3600MHz",
    "gpu": "NVIDIA GeForce RTX 3070",
    "storage": "1TB NVMe SSD (45% used)",
}


def seed_startup_programs() -> list[StartupProgram]:
    """Every seeded startup program starts out enabled."""
    return [StartupProgram(enabled=True, **entry) for entry in STARTUP_PROGRAM_CATALOG]


def seed_optimization_settings() -> list[OptimizationSetting]:
    """Every seeded setting starts out disabled."""
    return [OptimizationSetting(enabled=False, **entry) for entry in OPTIMIZATION_SETTING_CATALOG]


def system_info() -> SystemInfo:
    return SystemInfo(**SYSTEM_INFO)

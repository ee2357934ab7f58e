"""Bundled subset of the WebLLM prebuilt app config.

Only the fields the catalog merges are kept: ``model_id``,
``vram_required_MB`` and ``overrides.context_window_size``.
"""

from __future__ import annotations

from typing import Any

PREBUILT_APP_CONFIG: dict[str, Any] = {
    "model_list": [
        {
            "model_id": "Llama-3.2-1B-Instruct-q4f16_1-MLC",
            "vram_required_MB": 879.04,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.2-1B-Instruct-q4f32_1-MLC",
            "vram_required_MB": 1128.82,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.2-1B-Instruct-q0f16-MLC",
            "vram_required_MB": 2573.13,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.2-3B-Instruct-q4f16_1-MLC",
            "vram_required_MB": 2263.69,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.2-3B-Instruct-q4f32_1-MLC",
            "vram_required_MB": 2951.51,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.1-8B-Instruct-q4f16_1-MLC",
            "vram_required_MB": 5001.0,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Llama-3.1-8B-Instruct-q4f16_1-MLC-1k",
            "vram_required_MB": 4598.34,
            "low_resource_required": True,
            "overrides": {"context_window_size": 1024},
        },
        {
            "model_id": "Llama-3.1-8B-Instruct-q4f32_1-MLC",
            "vram_required_MB": 6101.01,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen3-0.6B-q4f16_1-MLC",
            "vram_required_MB": 1403.34,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen3-1.7B-q4f16_1-MLC",
            "vram_required_MB": 2036.66,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen3-4B-q4f16_1-MLC",
            "vram_required_MB": 3431.59,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen3-4B-q4f32_1-MLC",
            "vram_required_MB": 4327.71,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen3-8B-q4f16_1-MLC",
            "vram_required_MB": 5695.78,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Qwen2.5-Coder-7B-Instruct-q4f16_1-MLC",
            "vram_required_MB": 5106.67,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "gemma-2-2b-it-q4f16_1-MLC",
            "vram_required_MB": 1895.3,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "gemma-2-2b-it-q4f32_1-MLC",
            "vram_required_MB": 2508.75,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "gemma-2-9b-it-q4f16_1-MLC",
            "vram_required_MB": 6422.01,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Phi-3.5-mini-instruct-q4f16_1-MLC",
            "vram_required_MB": 3672.07,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Phi-3.5-mini-instruct-q4f32_1-MLC",
            "vram_required_MB": 5483.12,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Phi-3.5-mini-instruct-q4f16_1-MLC-1k",
            "vram_required_MB": 2520.07,
            "low_resource_required": True,
            "overrides": {"context_window_size": 1024},
        },
        {
            "model_id": "Mistral-7B-Instruct-v0.3-q4f16_1-MLC",
            "vram_required_MB": 4573.39,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "SmolLM2-360M-Instruct-q0f16-MLC",
            "vram_required_MB": 871.99,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "SmolLM2-1.7B-Instruct-q4f16_1-MLC",
            "vram_required_MB": 1774.19,
            "low_resource_required": True,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "stablelm-2-zephyr-1_6b-q4f16_1-MLC",
            "vram_required_MB": 2087.66,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "RedPajama-INCITE-Chat-3B-v1-q4f16_1-MLC",
            "vram_required_MB": 2972.09,
            "low_resource_required": False,
            "overrides": {"context_window_size": 2048},
        },
        {
            "model_id": "RedPajama-INCITE-Chat-3B-v1-q4f16_1-MLC-1k",
            "vram_required_MB": 2041.09,
            "low_resource_required": True,
            "overrides": {"context_window_size": 1024},
        },
        {
            "model_id": "DeepSeek-R1-Distill-Qwen-7B-q4f16_1-MLC",
            "vram_required_MB": 5106.67,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
        {
            "model_id": "Hermes-3-Llama-3.1-8B-q4f16_1-MLC",
            "vram_required_MB": 4876.13,
            "low_resource_required": False,
            "overrides": {"context_window_size": 4096},
        },
    ],
}

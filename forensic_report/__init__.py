"""
Forensic Report Section Generator
=================================

Serverless handler that writes one section of a forensic engineering
report at a time:
- Prompts: fixed per-section templates filled from the claim context
- Weather: optional historical weather lookup for the date/location of loss
- LLM: chat completion via OpenAI (default) or Amazon Bedrock

Each request is stateless; nothing is stored between invocations.
"""

__version__ = "1.0.0"

"""
Client Base Package

Transport-agnostic building blocks shared by the services:
- Models: immutable wire DTOs
- Errors: classified error taxonomy
- HTTP: endpoint descriptors, request builder and executor
- Streaming: SSE line handling and the fragment stream
- Logging / timeouts / constants: ambient infrastructure

Import from the submodules directly (``openrouter_client.base.models`` and so
on); this package module stays import-light.
"""

"""
APPLICATION LAYER - Use cases & orchestration

This layer contains:
- commands/  → Write operations (the contact submission pipeline)
- services/  → Helpers the use cases compose (notification rendering)
- common/    → Shared interfaces (Command base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""

"""Pipeline stages: provider adapters and result builders."""

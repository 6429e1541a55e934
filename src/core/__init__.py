"""Core: dominio, configuración, contratos y servicios de dispatch."""

from siloft_data.infrastructure.persistence.persistence_controller import PersistenceController

__all__ = ["PersistenceController"]

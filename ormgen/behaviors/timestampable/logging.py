from dbt.adapters.events.logging import AdapterLogger

logger = AdapterLogger("Timestampable")

"""
Component roles.

Roles are descriptive: the constants below are the recommended vocabulary,
but any name is accepted so applications can tag their own roles.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    name: str

    @classmethod
    def of(cls, name: str) -> "Role":
        return cls(name.strip() or "Unknown")

    def __str__(self) -> str:
        return self.name


Role.ENTITY = Role("Entity")
Role.VALUE_OBJECT = Role("ValueObject")
Role.AGGREGATE = Role("Aggregate")
Role.DOMAIN_EVENT = Role("DomainEvent")
Role.DOMAIN_SERVICE = Role("DomainService")
Role.INPUT_PORT = Role("InputPort")
Role.OUTPUT_PORT = Role("OutputPort")
Role.REPOSITORY = Role("Repository")
Role.USE_CASE = Role("UseCase")
Role.QUERY = Role("Query")
Role.ADAPTER = Role("Adapter")
Role.MAPPER = Role("Mapper")
Role.DIRECTIVE = Role("Directive")
Role.DIRECTIVE_HANDLER = Role("DirectiveHandler")
Role.QUERY_HANDLER = Role("QueryHandler")
Role.CONFIG = Role("Config")
Role.UNKNOWN = Role("Unknown")

RECOMMENDED_ROLES = [
    Role.ENTITY,
    Role.VALUE_OBJECT,
    Role.AGGREGATE,
    Role.DOMAIN_EVENT,
    Role.DOMAIN_SERVICE,
    Role.INPUT_PORT,
    Role.OUTPUT_PORT,
    Role.REPOSITORY,
    Role.USE_CASE,
    Role.QUERY,
    Role.ADAPTER,
    Role.MAPPER,
    Role.DIRECTIVE,
    Role.DIRECTIVE_HANDLER,
    Role.QUERY_HANDLER,
    Role.CONFIG,
    Role.UNKNOWN,
]

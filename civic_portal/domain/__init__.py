"""Domain layer: entities, value objects, aggregates and query services.

Bounded contexts:
    projects: Civic tech projects and the ProjectAggregate
    calendar: Community events
    news: Articles and announcements
    users: Registered users
    about: Organization profile, values and team
"""

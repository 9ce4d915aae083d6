"""Process composition: dependency injection container and static registrations."""

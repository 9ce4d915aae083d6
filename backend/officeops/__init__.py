"""officeops - transactional aggregate-mutation core for line-of-business services."""

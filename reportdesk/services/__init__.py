"""Services Layer — orchestration of repositories, validator, mapper and producer."""

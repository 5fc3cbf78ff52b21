from slidecore.engine.achievements.awards import Achievement, AchievementChecker

__all__ = ["Achievement", "AchievementChecker"]

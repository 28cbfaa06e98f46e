from lightsgame.strategies.base import NoPlanError, Strategy
from lightsgame.strategies.linear_algebra_hint import LinearAlgebraHint
from lightsgame.strategies.random_press import RandomPress

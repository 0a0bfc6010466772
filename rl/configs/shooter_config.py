"""
Training configuration for the bullet hell environment
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training - it's too slow with parallel envs
    "width": 400,
    "height": 500,
    "dt": 1/30,
    "max_steps": 3600,  # 2 minutes at 30 FPS
    "k_bullets": 16,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced: clear rounds, avoid losing lives",
    "R_HIT": 0.05,       # Per bullet landed on the boss
    "R_ROUND": 5.0,      # Per boss defeated
    "R_DEATH": 1.0,      # Per life lost
    "R_GAME_OVER": 5.0,  # Running out of lives
    "R_TIME": 0.001,     # Survival bonus per step
}

REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Dodging first - heavy penalties for getting hit",
    "R_HIT": 0.02,
    "R_ROUND": 2.0,
    "R_DEATH": 3.0,
    "R_GAME_OVER": 10.0,
    "R_TIME": 0.002,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}

"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值引擎参数
ENGINE_CONFIG = {
    "default_angle_mode": "deg",  # 与原计算器一致，默认角度制
    "program_cache_size": 256,  # 已编译后缀程序的LRU缓存条目数
}

# 结果显示格式
FORMAT_CONFIG = {
    "exponent_upper": 1e12,  # |v| >= 此值用指数形式
    "exponent_lower": 1e-6,  # 0 < |v| < 此值用指数形式
    "exponent_digits": 8,  # 指数形式的小数位数
    "fixed_digits": 10,  # 普通形式最多保留的小数位数
}

# 计算器会话
SESSION_CONFIG = {
    "history_limit": 60,  # 历史记录最多条数
    "random_seed": None,  # rand 常数的随机种子，None 表示不固定
}

# 批量求值
BATCH_CONFIG = {
    "expression_column": "expression",
    "angle_mode_column": "angle_mode",  # 可选列，逐行覆盖角度模式
    "output_path": "results.csv",
}

LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["default_angle_mode"] in ("deg", "rad"), "角度模式只能是 deg 或 rad"
    assert ENGINE_CONFIG["program_cache_size"] > 0, "缓存大小必须为正"
    assert 0 < FORMAT_CONFIG["exponent_lower"] < FORMAT_CONFIG["exponent_upper"], "指数阈值顺序错误"
    assert FORMAT_CONFIG["exponent_digits"] > 0, "指数形式小数位数必须为正"
    assert FORMAT_CONFIG["fixed_digits"] > 0, "小数位数必须为正"
    assert SESSION_CONFIG["history_limit"] > 0, "历史记录上限必须为正"
    logger.info("Configuration validated successfully!")
    return True

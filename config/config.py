"""配置文件"""

# 引擎参数
ENGINE_CONFIG = {
    "default_angle_unit": "radians",  # 与原PHP的三角函数一致
    "max_expression_length": 1000,    # 限制输入长度，防止过深的括号嵌套
}

# 结果格式化
FORMAT_CONFIG = {
    "precision": 12,  # 有效数字位数
    "zero_threshold": 1e-15,  # 绝对值低于此值显示为0（只吸收 sin(pi) 一类的舍入误差）
}

# 历史记录参数
HISTORY_CONFIG = {
    "max_entries": 10,  # 每个会话最多保留10条，超出时淘汰最旧的
    "max_sessions": 1000,  # 会话数上限，超出时淘汰最久未使用的会话
}

# 批量计算（CSV）
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "formatted_column": "formatted",
    "error_column": "error",
    "default_output_path": "results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["default_angle_unit"] in ("degrees", "radians"), "角度单位只能是 degrees 或 radians"
    assert ENGINE_CONFIG["max_expression_length"] > 0, "输入长度上限必须为正"
    assert 1 <= FORMAT_CONFIG["precision"] <= 17, "double 最多17位有效数字"
    assert FORMAT_CONFIG["zero_threshold"] >= 0, "零值阈值不能为负"
    assert HISTORY_CONFIG["max_entries"] > 0, "历史记录上限必须为正"
    assert HISTORY_CONFIG["max_sessions"] > 0, "会话数上限必须为正"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True

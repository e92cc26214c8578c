"""服务层模块.

提供折扣编辑会话的业务流程.

主要模块:
- discount_form: 折扣表单的本地校验、payload 构建、提交、删除与会话控制
"""

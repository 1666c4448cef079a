from __future__ import annotations
from aws_cdk import (
    Stack, Duration, CfnOutput,
    aws_dynamodb as ddb,
    aws_lambda as _lambda,
    aws_apigateway as apigw,
)
from constructs import Construct
from aws_cdk.aws_lambda_python_alpha import PythonFunction, PythonLayerVersion


class CoreStack(Stack):
    def __init__(self, scope: Construct, _id: str, **kwargs):
        super().__init__(scope, _id, **kwargs)

        products_dev = ddb.Table(self, "ProductsDev",
            partition_key=ddb.Attribute(name="productID", type=ddb.AttributeType.STRING),
            billing_mode=ddb.BillingMode.PAY_PER_REQUEST)
        products_prod = ddb.Table(self, "ProductsProd",
            partition_key=ddb.Attribute(name="productID", type=ddb.AttributeType.STRING),
            billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True)

        app_layer = PythonLayerVersion(
            self, "AppCommonLayer",
            entry="layers/app_common",
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_11]
        )

        env = {
            "DEV_TABLENAME": products_dev.table_name,
            "PROD_TABLENAME": products_prod.table_name,
            "LOG_LEVEL": "INFO",
            "LOG_JSON": "true",
        }

        fn_create = PythonFunction(self, "CreateProductFn",
            entry="lambdas/create_product", index="index.py", handler="handler",
            runtime=_lambda.Runtime.PYTHON_3_11, memory_size=256, timeout=Duration.seconds(10),
            environment=env, layers=[app_layer])

        products_dev.grant_write_data(fn_create)
        products_prod.grant_write_data(fn_create)

        api = apigw.RestApi(self, "ProductApi",
            rest_api_name="Product Create API",
            deploy_options=apigw.StageOptions(stage_name="prod", variables={"ENVIRONMENT": "PROD"}))
        apigw.Stage(self, "DevStage",
            deployment=api.latest_deployment, stage_name="dev",
            variables={"ENVIRONMENT": "DEV"})

        api.root.add_resource("products").add_method("POST", apigw.LambdaIntegration(fn_create))
        CfnOutput(self, "ApiUrl", value=api.url)
